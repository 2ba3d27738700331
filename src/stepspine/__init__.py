"""
stepspine - natural-language step interpretation.

Steps such as ``"I have 5 cukes"`` are matched against macros registered in
libraries; the best matching macro's handler runs with the captured
arguments and a merged context.

- stepspine.core: patterns, dictionary terms, scoring, errors, logging
- stepspine.framework: macros, libraries, interpreter, scenario runner
"""

__version__ = "0.1.0"

from stepspine.core import *  # noqa
from stepspine.framework import *  # noqa
