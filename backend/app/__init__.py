"""101 Fixes - lead capture backend and catalog engine."""
