"""
Transforms sub-package for csv-combinators.

Turns a parsed document (a list of string records) into a typed table.
Each transform is a plain function over a DataFrame (or a document) so it
can be tested on its own.

Design: Pipeline Pattern
- pipeline.py orchestrates the sequence of transforms.
- Individual transforms are in separate modules:
  - frame.py: Records -> string-typed DataFrame (optional header row).
  - numbers.py: Convert columns whose every value is numeric.
"""
