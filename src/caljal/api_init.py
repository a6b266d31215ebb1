"""Default engine bootstrap (import side-effect)."""
from .api import set_normalizer
from .bootstrap import build_normalizer

set_normalizer(build_normalizer())
