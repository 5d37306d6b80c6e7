from textinterp.rendering.interpolator import TextInterpolator
from textinterp.rendering.template_engine import ApostropheTemplateEngine

__all__ = ['TextInterpolator', 'ApostropheTemplateEngine']
