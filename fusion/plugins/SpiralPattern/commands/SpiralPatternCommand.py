"""
Title         : SpiralPatternCommand.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/commands/SpiralPatternCommand.py

Description
----------------------------------------------------------------------------
Fusion command dialog and event handlers for the spiral pattern.
Handlers only read dialog values and delegate to the spiral_pattern package.
"""

from __future__ import annotations

import logging
from typing import Any

import adsk.core
import adsk.fusion
from spiral_pattern.command_framework import fusion_command
from spiral_pattern.config import SpiralPatternConfig
from spiral_pattern.constants import Constants, Strings
from spiral_pattern.exceptions import EmptyTargetSetError, InvalidGeometryError, InvalidParameterRangeError
from spiral_pattern.fusion_adapter import FusionOccurrenceHost, axis_source_from_entity, targets_from_entities
from spiral_pattern.inputs import PatternInputs
from spiral_pattern.placement import run_spiral_pattern


logger = logging.getLogger("spiral_pattern.commands")


# --- Dialog Value Helpers -------------------------------------------------
def _design() -> adsk.fusion.Design:
    app = adsk.core.Application.get()
    return adsk.fusion.Design.cast(app.activeProduct)


def evaluate_input(inputs: adsk.core.CommandInputs, input_id: str, unit: str, label: str) -> float:
    """Evaluate a value input's expression in internal units.

    Raises:
        InvalidParameterRangeError: If the expression is not valid for `unit`
    """
    value_input = adsk.core.ValueCommandInput.cast(inputs.itemById(input_id))
    units_mgr = _design().unitsManager
    if value_input is None or not units_mgr.isValidExpression(value_input.expression, unit):
        raise InvalidParameterRangeError(Strings.MSG_INVALID_EXPRESSION.format(label=label), context={"id": input_id})
    return units_mgr.evaluateExpression(value_input.expression, unit)


def read_pattern_inputs(inputs: adsk.core.CommandInputs) -> PatternInputs:
    slider = adsk.core.IntegerSliderCommandInput.cast(inputs.itemById(Constants.INPUT_NUMBER))
    values = PatternInputs(
        count=Constants.MIN_COUNT,
        height=evaluate_input(inputs, Constants.INPUT_HEIGHT, Constants.LENGTH_UNIT_HEIGHT, Strings.LABEL_HEIGHT),
        distance=evaluate_input(inputs, Constants.INPUT_DISTANCE, Constants.LENGTH_UNIT_DISTANCE, Strings.LABEL_DISTANCE),
        angle=evaluate_input(inputs, Constants.INPUT_ANGLE, Constants.ANGLE_UNIT, Strings.LABEL_ANGLE),
    )
    return values.with_count(slider.valueOne)


def selected_entities(selection_input: adsk.core.SelectionCommandInput) -> list[Any]:
    return [selection_input.selection(i).entity for i in range(selection_input.selectionCount)]


# --- Dialog Construction --------------------------------------------------
def build_dialog(inputs: adsk.core.CommandInputs, config: SpiralPatternConfig) -> None:
    objects = inputs.addSelectionInput(Constants.INPUT_OBJECTS, Strings.LABEL_OBJECTS, Strings.TOOLTIP_OBJECTS)
    for selection_filter in Constants.OBJECT_FILTERS:
        objects.addSelectionFilter(selection_filter)
    objects.setSelectionLimits(1, 0)

    axis = inputs.addSelectionInput(Constants.INPUT_AXIS, Strings.LABEL_AXIS, Strings.TOOLTIP_AXIS)
    for selection_filter in Constants.AXIS_FILTERS:
        axis.addSelectionFilter(selection_filter)
    axis.setSelectionLimits(1, 1)

    slider = inputs.addIntegerSliderCommandInput(
        Constants.INPUT_NUMBER, Strings.LABEL_NUMBER, Constants.MIN_COUNT, Constants.MAX_COUNT
    )
    slider.valueOne = config.default_count
    inputs.addValueInput(
        Constants.INPUT_HEIGHT,
        Strings.LABEL_HEIGHT,
        Constants.LENGTH_UNIT_HEIGHT,
        adsk.core.ValueInput.createByString(config.default_height),
    )
    inputs.addValueInput(
        Constants.INPUT_DISTANCE,
        Strings.LABEL_DISTANCE,
        Constants.LENGTH_UNIT_DISTANCE,
        adsk.core.ValueInput.createByString(config.default_distance),
    )
    inputs.addValueInput(
        Constants.INPUT_ANGLE,
        Strings.LABEL_ANGLE,
        Constants.ANGLE_UNIT,
        adsk.core.ValueInput.createByString(config.default_angle),
    )


# --- Event Handler Bodies -------------------------------------------------
@fusion_command()
def on_input_changed(args: adsk.core.InputChangedEventArgs) -> None:
    changed_id = args.input.id
    if changed_id not in (Constants.INPUT_NUMBER, Constants.INPUT_HEIGHT, Constants.INPUT_DISTANCE):
        return
    inputs = args.inputs
    try:
        current = read_pattern_inputs(inputs)
    except InvalidParameterRangeError as exc:
        # Expressions are often invalid while the user is still typing.
        logger.debug("Skipping reconcile: %s", exc)
        return
    updated = current.reconcile(changed_id)
    if updated.distance != current.distance:
        adsk.core.ValueCommandInput.cast(inputs.itemById(Constants.INPUT_DISTANCE)).value = updated.distance
    if updated.height != current.height:
        adsk.core.ValueCommandInput.cast(inputs.itemById(Constants.INPUT_HEIGHT)).value = updated.height


def on_validate_inputs(args: adsk.core.ValidateInputsEventArgs) -> None:
    inputs = args.inputs
    try:
        read_pattern_inputs(inputs).to_parameters()
    except InvalidParameterRangeError:
        args.areInputsValid = False
    else:
        args.areInputsValid = True


@fusion_command(abort_transaction=True)
def on_execute(args: adsk.core.CommandEventArgs) -> None:
    inputs = args.command.commandInputs
    objects_input = adsk.core.SelectionCommandInput.cast(inputs.itemById(Constants.INPUT_OBJECTS))
    axis_input = adsk.core.SelectionCommandInput.cast(inputs.itemById(Constants.INPUT_AXIS))

    targets = targets_from_entities(selected_entities(objects_input))
    if not targets:
        raise EmptyTargetSetError(Strings.MSG_NO_COMPONENTS)
    axis_entities = selected_entities(axis_input)
    if not axis_entities:
        raise InvalidGeometryError(Strings.MSG_NO_AXIS)

    params = read_pattern_inputs(inputs).to_parameters()
    source = axis_source_from_entity(axis_entities[0])

    root = _design().rootComponent
    host = FusionOccurrenceHost(root, adsk.core.Matrix3D.create)
    requests = run_spiral_pattern(
        source,
        params,
        targets,
        host,
        root_name=root.name,
        root_kind=root.objectType,
    )
    logger.info(Strings.MSG_PATTERN_CREATED.format(count=len(requests)))


# --- Fusion Handler Classes -----------------------------------------------
class SpiralPatternInputChangedHandler(adsk.core.InputChangedEventHandler):
    def notify(self, args: adsk.core.InputChangedEventArgs) -> None:
        on_input_changed(args)


class SpiralPatternValidateInputsHandler(adsk.core.ValidateInputsEventHandler):
    def notify(self, args: adsk.core.ValidateInputsEventArgs) -> None:
        try:
            on_validate_inputs(args)
        except Exception:
            logger.exception("Input validation failed")
            args.areInputsValid = False


class SpiralPatternExecuteHandler(adsk.core.CommandEventHandler):
    def notify(self, args: adsk.core.CommandEventArgs) -> None:
        if not on_execute(args):
            logger.warning("Execute failed; the command transaction is rolled back.")


class SpiralPatternCommandCreatedHandler(adsk.core.CommandCreatedEventHandler):
    """Build the dialog and connect the command events.

    Fusion only keeps weak references to handlers, so they are stored on the
    instance for the lifetime of the add-in.
    """

    def __init__(self, config: SpiralPatternConfig) -> None:
        super().__init__()
        self.config = config
        self.handlers: list[Any] = []

    def notify(self, args: adsk.core.CommandCreatedEventArgs) -> None:
        self._create(args)

    @fusion_command()
    def _create(self, args: adsk.core.CommandCreatedEventArgs) -> None:
        cmd = args.command
        cmd.isExecutedWhenPreEmpted = False
        build_dialog(cmd.commandInputs, self.config)

        self.handlers.clear()
        for event, handler in (
            (cmd.inputChanged, SpiralPatternInputChangedHandler()),
            (cmd.validateInputs, SpiralPatternValidateInputsHandler()),
            (cmd.execute, SpiralPatternExecuteHandler()),
        ):
            event.add(handler)
            self.handlers.append(handler)
