"""
Services Module

Key Submodules:
- scripts: start/shutdown script generation per platform

Usage:
    from easypack.services.scripts import ScriptConfig, generate_scripts
"""
