"""
allkeywords: keyword lookup generator for the SQL lexer.

Scans the keyword sections of a yacc grammar (sql.y) and emits a Go file
with a keyword -> (token, category) map and a switch-based GetKeywordID
lookup function.
"""
