from .base import BaseMetaBox
from .multiple import MultipleMetaBox
from .repeat import RepeatMetaBox
from .simple import SimpleMetaBox

__all__ = ["BaseMetaBox", "SimpleMetaBox", "MultipleMetaBox", "RepeatMetaBox"]
