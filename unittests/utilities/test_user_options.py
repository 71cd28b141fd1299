from dataclasses import dataclass
from unittest import TestCase

from rotcalc.utilities.mixin_classes import UserOptionConfigured
from rotcalc.utilities.options import UserOptions


@dataclass
class ExampleOptions(UserOptions):

    example_int: int = 1234

    example_list: list | None = None

    def override_options(self):

        if self.example_list is None:
            self.example_list = []


class Example(UserOptionConfigured[ExampleOptions], ExampleOptions):

    def __init__(self, options: ExampleOptions | None = None):

        super().__init__(ExampleOptions, options=options)


class TestUserOptions(TestCase):

    def test_options_dict(self):

        options = ExampleOptions(example_int=5)

        self.assertEqual(options.options_dict, {'example_int': 5, 'example_list': []})

    def test_apply_options(self):

        class Target:
            pass

        target = Target()

        ExampleOptions(example_int=7).apply_options(target)

        self.assertEqual(target.example_int, 7)  # type: ignore[attr-defined]
        self.assertEqual(target.example_list, [])  # type: ignore[attr-defined]


class TestUserOptionConfigured(TestCase):

    def test_defaults(self):

        example = Example()

        self.assertEqual(example.example_int, 1234)
        self.assertEqual(example.original_options, ExampleOptions(example_list=[]))

    def test_reset_settings(self):

        options = ExampleOptions(example_int=3, example_list=[1])

        example = Example(options)

        example.example_int = 99
        example.example_list.append(2)

        # the original options are copied so changes to the instance never leak back
        self.assertEqual(example.original_options.example_list, [1])

        example.reset_settings()

        self.assertEqual(example.example_int, 3)
        self.assertEqual(example.example_list, [1])

    def test_reset_settings_copies(self):

        example = Example(ExampleOptions(example_list=[1]))

        example.reset_settings()
        example.example_list.append(2)

        self.assertEqual(example.original_options.example_list, [1])
