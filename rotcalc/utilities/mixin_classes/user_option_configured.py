# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`UserOptionConfigured` mixin which applies a :class:`.UserOptions` dataclass to an
instance and remembers it so the instance can later be returned to those settings.

The configured class inherits from both the mixin and its options dataclass, with the mixin first::

    @dataclass
    class RotationConverterOptions(UserOptions):
        decimals: int = 4

    class RotationConverter(UserOptionConfigured[RotationConverterOptions], RotationConverterOptions):
        def __init__(self, options: RotationConverterOptions | None = None):
            super().__init__(RotationConverterOptions, options=options)

    converter = RotationConverter()
    converter.decimals = 8
    converter.reset_settings()  # decimals is 4 again
"""

import copy

from typing import Generic, TypeVar

from rotcalc.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
The options dataclass a configured class uses
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin that configures an instance from a :class:`.UserOptions` dataclass and can restore that configuration.

    A deep copy of the options is kept in :attr:`original_options`, so changing the settings on the instance (or
    mutating the options object that was passed in) never changes what :meth:`reset_settings` restores.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The :class:`.UserOptions` subclass the instance is configured by.  A default instance of
                             it is used when ``options`` is ``None``.
        :param options: The options to apply to the instance
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        self._original_options: OptionsT = copy.deepcopy(options)
        """
        The options the instance was created with
        """

    def reset_settings(self) -> None:
        """
        Restores every setting to the value it had when the instance was created.
        """

        copy.deepcopy(self._original_options).apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        The options the instance was created with
        """

        return self._original_options
