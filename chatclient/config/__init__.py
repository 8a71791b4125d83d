from .model import ClientConfig  # noqa: F401

__all__ = ["ClientConfig"]
