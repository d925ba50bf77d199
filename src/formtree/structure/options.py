"""Build-wide options for value trees."""

from attrs import frozen


@frozen
class BuildOptions:
    """Options applied uniformly to every node of a built tree.

    Params:
        validate_all_rules: Collect every rejection instead of stopping at the first
    """

    validate_all_rules: bool = False
