"""Input grammars for cfgt, registered in detect-mode priority order."""

from .json import JSONGrammar
from .json5 import JSON5Grammar
from .hcl import HCLGrammar
