"""
OpenNOW installer — platform-aware acquisition and install pipeline.
"""

__version__ = "0.1.0"
