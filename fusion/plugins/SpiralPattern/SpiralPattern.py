"""
Title         : SpiralPattern.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/SpiralPattern.py

Description
----------------------------------------------------------------------------
Fusion 360 add-in entry point. Registers the Spiral Pattern command in the
Solid > Create panel and removes it again when the add-in stops.
"""

from __future__ import annotations

import sys
from pathlib import Path


_plugin_dir = str(Path(__file__).parent)
if _plugin_dir not in sys.path:
    sys.path.insert(0, _plugin_dir)

import logging
import traceback
from typing import Any

import adsk.core
from spiral_pattern.config import default_config_path, load_config
from spiral_pattern.constants import Constants
from spiral_pattern.exceptions import ConfigurationError
from spiral_pattern.logging_config import setup_logging

from .commands.SpiralPatternCommand import SpiralPatternCommandCreatedHandler


PANEL_ID = "SolidCreatePanel"

logger = logging.getLogger("spiral_pattern.addin")

# Fusion holds handlers weakly; keep them alive while the add-in runs.
_handlers: list[Any] = []


def run(context: Any) -> None:
    """Add the command button to the Create panel."""
    ui = None
    try:
        app = adsk.core.Application.get()
        ui = app.userInterface

        addin_dir = Path(__file__).parent
        try:
            config = load_config(default_config_path(addin_dir))
        except ConfigurationError as exc:
            ui.messageBox(f"SpiralPattern configuration ignored: {exc}")
            config = load_config(None)
        setup_logging(config.log_level, str(addin_dir / config.log_file) if config.log_file else None)

        cmd_def = ui.commandDefinitions.itemById(Constants.BUTTON_ID)
        if not cmd_def:
            cmd_def = ui.commandDefinitions.addButtonDefinition(
                Constants.BUTTON_ID, Constants.BUTTON_NAME, Constants.BUTTON_TOOLTIP, ""
            )

        on_created = SpiralPatternCommandCreatedHandler(config)
        cmd_def.commandCreated.add(on_created)
        _handlers.append(on_created)

        panel = ui.allToolbarPanels.itemById(PANEL_ID)
        if panel and not panel.controls.itemById(Constants.BUTTON_ID):
            panel.controls.addCommand(cmd_def)
        logger.info("SpiralPattern add-in started.")
    except Exception:
        if ui:
            ui.messageBox(f"Failed:\n{traceback.format_exc()}")


def stop(context: Any) -> None:
    """Remove the command button and definition."""
    ui = None
    try:
        app = adsk.core.Application.get()
        ui = app.userInterface

        panel = ui.allToolbarPanels.itemById(PANEL_ID)
        control = panel.controls.itemById(Constants.BUTTON_ID) if panel else None
        if control:
            control.deleteMe()

        cmd_def = ui.commandDefinitions.itemById(Constants.BUTTON_ID)
        if cmd_def:
            cmd_def.deleteMe()

        _handlers.clear()
        logger.info("SpiralPattern add-in stopped.")
    except Exception:
        if ui:
            ui.messageBox(f"Failed:\n{traceback.format_exc()}")
