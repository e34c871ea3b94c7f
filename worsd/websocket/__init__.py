"""
WebSocket Handlers Package
"""
