from .reference_md import REQUIRED_SECTIONS, generate_reference_md

__all__ = ["REQUIRED_SECTIONS", "generate_reference_md"]
