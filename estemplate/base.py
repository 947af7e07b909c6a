#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Builder base -- the `source()` contract shared by every template builder.

A builder declares its options as class attributes::

    class StopAnalyzer(Builder):
        TYPE = "stop"

        stopwords = Many()
        stopwords_path = Option()

Reading an option on an instance returns a chainable setter, so builders
are configured with::

    StopAnalyzer("my_stop").stopwords("_english_").stopwords_path("stop.txt")

and rendered with `source(include_name)`. Options render in declaration
order; an option declared later with the same key overrides an earlier one.
Options that were never set are left out of the output.
"""

from estemplate.exceptions import ValidationError
from estemplate.utils import one_or_many, render


class Option:
    """A single optional value, rendered under `key` once set."""

    def __init__(self, key=None, choices=None, required=False, builds=None):
        self.key = key
        self.choices = choices
        self.required = required
        # what the loader builds from a plain value: a family name or a class
        self.builds = builds
        self.attr = None

    def __set_name__(self, owner, name):
        self.attr = name
        if self.key is None:
            self.key = name.rstrip("_")

    def __get__(self, instance, owner=None):
        if instance is None:
            return self

        def setter(*values):
            self.store(instance, *values)
            return instance

        setter.__name__ = self.attr
        return setter

    def store(self, instance, value):
        instance._values[self.attr] = value

    def get(self, instance):
        return instance._values.get(self.attr)

    def is_set(self, instance):
        return self.get(instance) is not None

    def encode(self, value):
        return render(value)

    def render(self, instance, options):
        if self.is_set(instance):
            options[self.key] = self.encode(self.get(instance))

    def candidates(self, value):
        return [value]

    def violations(self, instance):
        if not self.is_set(instance):
            return [self.key] if self.required else []
        if self.choices is not None:
            for value in self.candidates(self.get(instance)):
                if render(value) not in self.choices:
                    return [self.key]
        return []

    def children(self, instance):
        """Yield `(path, builder, include_name)` for nested builders."""
        value = self.get(instance)
        if isinstance(value, Builder):
            yield self.key, value, False


class Positive(Option):
    """A number rendered only when strictly positive."""

    def is_set(self, instance):
        value = self.get(instance)
        return value is not None and value > 0


class Constant(Option):
    """A flag that, when true, renders a constant under `key`."""

    def __init__(self, value, key=None):
        super().__init__(key=key)
        self.value = value

    def is_set(self, instance):
        return bool(self.get(instance))

    def encode(self, value):
        return self.value


class Many(Option):
    """Append-only values: one renders as a scalar, more as a list."""

    def store(self, instance, *values):
        instance._values.setdefault(self.attr, []).extend(values)

    def is_set(self, instance):
        return bool(self.get(instance))

    def encode(self, values):
        return one_or_many([render(value) for value in values])

    def candidates(self, values):
        return values

    def children(self, instance):
        for value in self.get(instance) or []:
            if isinstance(value, Builder):
                yield self.key, value, False


class Listed(Many):
    """Append-only values always rendered as a list."""

    def encode(self, values):
        return [render(value) for value in values]


class Joined(Many):
    """Append-only values rendered as a single `sep`-joined string."""

    def __init__(self, sep, key=None, choices=None, required=False, builds=None):
        super().__init__(key=key, choices=choices, required=required, builds=builds)
        self.sep = sep

    def encode(self, values):
        return self.sep.join(str(render(value)) for value in values)


class Nested(Option):
    """A single child builder rendered without its name."""

    def encode(self, value):
        return value.source(False)


class Named(Many):
    """Child builders rendered as `{child.name: child.source()}`.

    With `merge=True` the children's own mappings are merged instead.
    Rendering updates a mapping already present under `key`.
    """

    def __init__(self, key=None, merge=False, builds=None):
        super().__init__(key=key, builds=builds)
        self.merge = merge

    def encode(self, values):
        encoded = {}
        for value in values:
            if self.merge:
                encoded.update(value.source(False))
            else:
                encoded[value.name] = value.source(False)
        return encoded

    def render(self, instance, options):
        if self.is_set(instance):
            options.setdefault(self.key, {}).update(self.encode(self.get(instance)))

    def children(self, instance):
        for value in self.get(instance) or []:
            if self.merge:
                yield self.key, value, False
            else:
                yield f"{self.key}.{value.name}", value, True


class NamedList(Many):
    """Child builders rendered as a list of `{child.name: child.source()}`."""

    def encode(self, values):
        return [{value.name: value.source(False)} for value in values]

    def children(self, instance):
        for value in self.get(instance) or []:
            yield f"{self.key}.{value.name}", value, True


class Into(Option):
    """A child builder rendered as the `entry` item of the mapping at `key`."""

    def __init__(self, key, entry, builds=None):
        super().__init__(key=key, builds=builds)
        self.entry = entry

    def render(self, instance, options):
        if self.is_set(instance):
            options.setdefault(self.key, {})[self.entry] = self.encode(
                self.get(instance)
            )

    def children(self, instance):
        value = self.get(instance)
        if isinstance(value, Builder):
            yield f"{self.key}.{self.entry}", value, False


class Spread(Many):
    """Child builders whose mappings are merged into the parent, keys prefixed."""

    def __init__(self, prefix, builds=None):
        super().__init__(key=prefix.rstrip("."), builds=builds)
        self.prefix = prefix

    def render(self, instance, options):
        for value in self.get(instance) or []:
            for key, item in value.source(False).items():
                options[self.prefix + key] = item


class Builder:
    """Base class of every template builder.

    `TYPE` is the fixed `"type"` discriminator, `WRAP` the fixed key used
    instead of the builder's name when rendering with `include_name=True`.
    """

    TYPE = None
    WRAP = None

    _options = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        declared = {}
        for klass in reversed(cls.__mro__):
            for attr, value in vars(klass).items():
                if isinstance(value, Option):
                    declared[attr] = value
                elif attr in declared:
                    # shadowed by a subclass, e.g. `encoder = None`
                    del declared[attr]
        cls._options = tuple(declared.values())

    def __init__(self, name=None):
        self._name = name
        self._values = {}

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._name!r}>"

    @property
    def name(self):
        return self._name

    @classmethod
    def option(cls, key):
        """Look up a declared option by attribute name, then by wire key."""
        for option in cls._options:
            if key == option.attr:
                return option
        for option in cls._options:
            if key == option.key:
                return option
        return None

    def _wrap_key(self):
        return self.WRAP or self._name

    def _fixed(self):
        return {"type": self.TYPE} if self.TYPE is not None else {}

    def _options_source(self):
        options = self._fixed()
        for option in self._options:
            option.render(self, options)
        return options

    def source(self, include_name=False):
        options = self._options_source()
        if not include_name:
            return options
        return {self._wrap_key(): options}

    def _problems(self):
        """Checks spanning several options, returns the offending field names."""
        return []

    def validate(self, include_name=True, recursive=False):
        invalid = []
        if include_name and not self._wrap_key():
            invalid.append("name")
        for option in self._options:
            invalid.extend(option.violations(self))
        invalid.extend(self._problems())

        if recursive:
            for option in self._options:
                for path, child, child_include_name in option.children(self):
                    try:
                        child.validate(child_include_name, recursive=True)
                    except ValidationError as e:
                        invalid.extend(f"{path}.{field}" for field in e.invalid)

        if invalid:
            raise ValidationError(invalid)
