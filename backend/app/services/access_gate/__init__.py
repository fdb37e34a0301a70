"""
Access Gate Services

Email-gated entry to the fixes catalog:
- AccessGate: LANDING -> EMAIL_CHECK -> UNLOCKED state machine
- SheetShortcut: best-effort subscribe that always returns the sheet link
- LocalAccessStoreClient: async in-process client for the Access Store
"""

from .clients import AccessStoreClient, AccessWatch, LocalAccessStoreClient
from .state_machine import (
    AccessGate,
    GateNotice,
    GateState,
    GATE_CONFIG,
    InvalidGateTransition,
    WELCOME_MESSAGE,
    FAILURE_MESSAGE,
)
from .sheet_shortcut import SheetShortcut, SHEET_URL, OPENING_MESSAGE

__all__ = [
    'AccessStoreClient',
    'AccessWatch',
    'LocalAccessStoreClient',
    'AccessGate',
    'GateNotice',
    'GateState',
    'GATE_CONFIG',
    'InvalidGateTransition',
    'WELCOME_MESSAGE',
    'FAILURE_MESSAGE',
    'SheetShortcut',
    'SHEET_URL',
    'OPENING_MESSAGE',
]
