# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module composes an ordered chain of elemental rotations into a single rotation.

Each :class:`RotationStep` rotates about one of the fixed world axes.  The steps are applied in order, with every new
step pre-multiplying the rotation accumulated so far:

.. math::
    \mathbf{q} = \mathbf{q}_n\otimes\cdots\otimes\mathbf{q}_2\otimes\mathbf{q}_1

This means each step is interpreted in the world frame, not in the frame left behind by the previous steps.  Reversing
the multiplication order would turn this into body frame composition, which is a different rotation.

The editing helpers (:func:`add_step`, :func:`remove_step`, :func:`update_step`) never modify a chain in place; they
return a new tuple of steps.  Step ids are supplied by the caller and are only used to find steps.
"""

from dataclasses import dataclass, replace
from typing import Hashable, Iterable, Sequence

from rotcalc._typing import AXIS, DOUBLE_ARRAY
from rotcalc.rotations.core.elementals import axis_angle_to_quaternion
from rotcalc.rotations.core.quaternion_math import identity_quaternion, quaternion_multiplication, quaternion_normalize
from rotcalc.rotations.result import RotationResult


__all__ = ['RotationStep', 'chain_to_quaternion', 'compute_chain', 'default_step', 'add_step', 'remove_step',
           'update_step']


@dataclass(frozen=True)
class RotationStep:
    """
    One elemental rotation about a world axis.
    """

    id: Hashable
    """
    An opaque identifier assigned by the caller.  It has no effect on the rotation.
    """

    axis: AXIS
    """
    The world axis to rotate about (x, y, or z)
    """

    angle_deg: float
    """
    The right handed rotation angle in degrees
    """

    def to_quaternion(self) -> DOUBLE_ARRAY:
        """
        Returns the elemental rotation quaternion for this step
        """

        return axis_angle_to_quaternion(self.axis, self.angle_deg)


def chain_to_quaternion(steps: Iterable[RotationStep]) -> DOUBLE_ARRAY:
    """
    Composes the chain of steps into a single unit rotation quaternion.

    Starting from the identity, each step's elemental quaternion pre-multiplies the accumulated quaternion (world frame
    composition).  An empty chain gives the identity quaternion.

    :param steps: the steps in the order they are applied
    :return: the composed rotation quaternion as ``[x, y, z, w]``
    """

    accumulated = identity_quaternion()

    for step in steps:
        accumulated = quaternion_multiplication(step.to_quaternion(), accumulated)

    return quaternion_normalize(accumulated)


def compute_chain(steps: Iterable[RotationStep]) -> RotationResult:
    """
    Composes the chain of steps and returns the quaternion, Euler, and matrix views of the result.

    See :func:`chain_to_quaternion` for the composition rule.

    :param steps: the steps in the order they are applied
    :return: the result of the composed rotation
    """

    return RotationResult.from_quaternion(chain_to_quaternion(steps))


def default_step(step_id: Hashable) -> RotationStep:
    """
    Returns a new step that does nothing (0 degrees about x).

    :param step_id: the id to give the new step
    """

    return RotationStep(step_id, 'x', 0.0)


def add_step(steps: Sequence[RotationStep], step: RotationStep) -> tuple[RotationStep, ...]:
    """
    Returns the chain with ``step`` appended to the end.

    :param steps: the current chain
    :param step: the step to append
    :return: the new chain
    :raises ValueError: if a step with the same id is already in the chain
    """

    if any(existing.id == step.id for existing in steps):
        raise ValueError('A step with id {!r} is already in the chain'.format(step.id))

    return (*steps, step)


def remove_step(steps: Sequence[RotationStep], step_id: Hashable) -> tuple[RotationStep, ...]:
    """
    Returns the chain without the step with the given id.

    A chain always keeps at least one step, so removing the only remaining step returns the chain unchanged.  Removing
    an id that is not in the chain also returns the chain unchanged.

    :param steps: the current chain
    :param step_id: the id of the step to remove
    :return: the new chain
    """

    if len(steps) <= 1:
        return tuple(steps)

    return tuple(step for step in steps if step.id != step_id)


def update_step(steps: Sequence[RotationStep], step_id: Hashable,
                axis: AXIS, angle_deg: float) -> tuple[RotationStep, ...]:
    """
    Returns the chain with the axis and angle of the step with the given id replaced.

    The position of the step in the chain is unchanged.

    :param steps: the current chain
    :param step_id: the id of the step to change
    :param axis: the new axis for the step
    :param angle_deg: the new angle for the step in degrees
    :return: the new chain
    """

    return tuple(replace(step, axis=axis, angle_deg=angle_deg) if step.id == step_id else step for step in steps)
