from .settings import EditorSettings, load_settings

__all__ = ["EditorSettings", "load_settings"]
