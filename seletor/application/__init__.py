"""Serviços de aplicação: fachada de seletores e codec JSON."""
from .css_selector_builder import CssSelectorBuilder, css_selector_builder
from .json_codec import from_json, to_json

__all__ = ["CssSelectorBuilder", "css_selector_builder", "from_json", "to_json"]
