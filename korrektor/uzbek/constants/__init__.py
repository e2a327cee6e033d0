"""
Constant tables for the Uzbek modules

All tables are built once at import time and never modified afterwards.
"""
