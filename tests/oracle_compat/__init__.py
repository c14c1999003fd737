"""
Oracle compatibility suite for OraRegex.

Each module exercises one of the public functions with the argument lists and
results Oracle documents for REGEXP_LIKE, REGEXP_COUNT, REGEXP_INSTR and
REGEXP_SUBSTR:

- Default newline behavior and the i, c, n, m and x match parameters
- Start positions, occurrences and subexpressions
- NULL arguments and argument validation
- Cross-function properties (counts, spans and extracted text agree)

Run tests with: pytest tests/oracle_compat/ -v
"""
