# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

def make_backways_map (enum_class):
    """Make a backways value mapping.

    This takes in what is basically an enum class of tag or type codes
    and constructs a dictionary keyed on the codes. Its values will be
    the associated names.

    Args:
        enum_class (class): The class to make a reverse mapping of.

    Returns:
        dict:               A mapping with keys matching the values of
                            the class. Its values will match the class
                            variable names.

    Examples:
        >>> class SomeTags:
        ...     Make    = 0x010f
        ...     Model   = 0x0110
        ...
        >>> make_backways_map(SomeTags)
        {271: 'Make', 272: 'Model'}

        Two names for the same code are not allowed.

        >>> class BadTags:
        ...     Make        = 0x010f
        ...     AlsoMake    = 0x010f
        ...
        >>> make_backways_map(BadTags)
        Traceback (most recent call last):
          File "<stdin>", line 1, in <module>
        AssertionError: Can't have more than one 271 (BadTags.Make and
                BadTags.AlsoMake)

    """

    result  = { }

    error   = "Can't have more than one {{:d}} ({name}.{{}} and" \
              " {name}.{{}})".format(name = enum_class.__name__).format

    for key, value in vars(enum_class).items():
        if key.startswith("_"):
            # Skip the regular python attributes.
            continue

        assert value not in result, error(value, result[value], key)
        result[value] = key

    return result
