"""leggio-ship: package and deploy Leggio Android release builds."""

__version__ = "0.1.0"
