"""
Kitchen Control - back-office service for store orders to the central kitchen
"""
__version__ = "1.0.0"
