# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

from dataclasses import dataclass, fields

from typing import Any

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    This is an abstract class used to create a dataclass of user options.

    These options are used to set defaults for parameters set inside the associated
    class for the options.

    Example:
        RotationConverterOptions contains the default options for the RotationConverter class.

    Custom objects built from this abstract class must follow the naming scheme <callable_name>Options and be loaded
    into the options keyword argument for callable_name.__init__().

    To apply options to your class, the UserOptions.apply_options() method should be invoked.

    for example:
        >>> @dataclass
        >>> class ExampleOptions(UserOptions):
        >>>     example_var : int = 1234

        >>> class Example:
        >>>     def __init__(self, options = None):
        >>>         if options is None:
        >>>             options = ExampleOptions()
        >>>         options.apply_options(self) #apply the options as attributes of self
        >>> my_example = Example()
        >>> print(my_example.example_var)
        ...     1234
    """

    def override_options(self):
        '''
        This method is used for special cases when certain options should be overwritten
        '''
        pass

    def apply_options(self, target: object) -> None:
        """
        Update the options as attributes of the object class

        :param target: the instance that we are to update
        """
        target.__dict__.update(self.options_dict)

    @property
    def options_dict(self) -> dict[str, Any]:
        """
        Determine the options input to the dataclass.

        This property method will ignore all internal properties and functions
        """

        self.override_options()
        return {option.name: getattr(self, option.name) for option in fields(self)}
