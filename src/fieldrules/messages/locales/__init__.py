"""Bundled message tables, one module per locale code (``en_US``, ``zh_CN``)."""
