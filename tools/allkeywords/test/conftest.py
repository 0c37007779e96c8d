"""Shared fixtures for allkeywords tests."""

import pytest
import sys
import os

# Add the project root to sys.path so 'tools.allkeywords' is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", ".."))


EXAMPLE_GRAMMAR = """\
reserved_keyword:
SELECT
WHERE

unreserved_keyword:
NAME
"""


# Trimmed-down shape of sql.y: rules around the keyword sections must be
# ignored, and the extra cockroachdb sections share codes with the
# standard ones.
SQL_Y_GRAMMAR = """\
%token <str> ABORT ABSOLUTE ALL ANALYSE BETWEEN BIGINT FAMILY NAME

// Keyword category lists.
//
// "Unreserved" keywords can be used as column, table or function names.
unreserved_keyword:
  ABORT
| ABSOLUTE
| NAME

// Column identifier --- keywords that can be column, table, etc names.
col_name_keyword:
  BETWEEN
| BIGINT

type_func_name_keyword:
  COLLATION
| CROSS

cockroachdb_extra_type_func_name_keyword:
  FAMILY

reserved_keyword:
  ALL
| ANALYSE
| ANALYZE

cockroachdb_extra_reserved_keyword:
  INDEX
| NOTHING

non_reserved_word:
  IDENT
| unreserved_keyword
| col_name_keyword
"""


@pytest.fixture
def example_grammar():
    """The three-keyword grammar from the generator docs."""
    return EXAMPLE_GRAMMAR


@pytest.fixture
def sql_y_grammar():
    """Grammar covering every default category header."""
    return SQL_Y_GRAMMAR


@pytest.fixture
def lines():
    """Split grammar text into lines the way a text file iterates."""
    def _lines(text):
        return text.splitlines(keepends=True)
    return _lines
