"""101 Fixes - Services"""
