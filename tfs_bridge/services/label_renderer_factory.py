"""Factory for creating label renderers with DEBUG mode support."""

from ..config.settings import Settings
from ..protocols import LabelRendererProtocol
from .label_renderer import VendorLabelRenderer
from .mock_label_renderer import MockLabelRenderer


def create_label_renderer(debug_mode: bool = False) -> LabelRendererProtocol:
    """
    Create a label renderer based on debug mode.

    Args:
        debug_mode: If True, returns MockLabelRenderer; if False, returns VendorLabelRenderer

    Returns:
        LabelRendererProtocol implementation
    """
    if debug_mode:
        print("🔧 DEBUG mode: Using MockLabelRenderer")
        return MockLabelRenderer()
    print("🌐 Production mode: Using VendorLabelRenderer")
    return VendorLabelRenderer()


def create_label_renderer_from_settings(settings: Settings) -> LabelRendererProtocol:
    """
    Create a label renderer using application settings.

    Args:
        settings: Application settings

    Returns:
        LabelRendererProtocol implementation
    """
    return create_label_renderer(debug_mode=settings.DEBUG)
