"""
Connection status tracking for listener sessions.

Connection lifecycle is tracked separately from queue processing:
connection_status: DOWN | CONNECTING | UP | FAILED

Pure data owned by SpeakerGateway / SpeakerConnection, never by the runtime.
"""
from enum import Enum

class ConnectionStatus(Enum):
    """
    Speaker connection lifecycle status.

    Independent of the processing loop: queued sentences keep draining
    while the connection is DOWN.
    """
    DOWN = "DOWN"              # Not connected
    CONNECTING = "CONNECTING"  # Attempting connection (with retry backoff)
    UP = "UP"                  # Active WebSocket connection
    FAILED = "FAILED"          # Gave up: retry cap reached or fatal error
