"""
Title         : __init__.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/commands/__init__.py

Description
----------------------------------------------------------------------------
Fusion command handlers for the SpiralPattern add-in. Imported relative to the
add-in package so another add-in's `commands` package is never picked up.
"""
