"""Tree and option models."""

from astext.models.node import Child, Element, Node
from astext.models.options import ZWSP, RenderOptions, canonical_options, resolve_options
