"""RGBA colours, named colours and bitmaps for 2D game development."""

__version__ = "1.0.0"
__all__ = ["bitmap", "color"]