"""Flutter code generation from layout trees."""

from .generator import CodeGenerator, GenerationResult, generate_code, generate_preview
from .page import assemble_page, sanitize_page_name
from .synthesizer import WidgetSynthesizer
from .templates import TEMPLATES, GeneratedFragment, WidgetContext

__all__ = [
    "CodeGenerator",
    "GeneratedFragment",
    "GenerationResult",
    "TEMPLATES",
    "WidgetContext",
    "WidgetSynthesizer",
    "assemble_page",
    "generate_code",
    "generate_preview",
    "sanitize_page_name",
]
