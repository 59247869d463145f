"""
Number literal recognition and base conversion

Recognizes binary, octal, decimal and hexadecimal integer literals and
decimal floats in source text, and renders them in other bases or in
scientific notation. Literal grammars are registered per context, such as a
source language, and looked up with a fallback grammar.
"""

__version__ = "0.4.0"


from ._error import *
from ._literal import *
from ._classify import *
from ._format import *
from ._parser import *
from ._python import *
from ._registry import *
from ._scan import *
