# streamecs

Building blocks for an entity-component-system (ECS) in plain Python.

## What it provides

- **`streamecs.entity`**: `Entity` is the abstract entity key.
  `DefaultEntity` is a frozen, ordered dataclass that holds an `index` and a
  `generation`. Each part is a 32-bit unsigned integer by default. A subclass
  can change the limits by overriding `INDEX_MAX` and `GENERATION_MAX`.
  - A value that is not an `int` raises `TypeError`.
  - A value outside the limits raises `ValueError`.
  - `DefaultEntity.with_(index, generation)` builds a key.
  - `DefaultEntity.null()` gives the key that belongs to no entity: the largest
    index, with generation zero. `is_null()` recognises that key.
  - `str()` of a key looks like `42v127`.
- **`streamecs.lookup`**: `contains_type(items, kind)` and
  `find_type(items, kind)` match items whose type is exactly `kind`.
  `type_name(kind)` gives the qualified name of a type, or of a value's type.
- **`streamecs.resources`**: `ResourceRegistry` holds singleton values found
  by their exact type.
  - It offers `contains`, `get`, `provide`, `with_`, `is_empty`, `len()` and
    iteration.
  - `get` returns `None` when the resource is missing. `provide` raises
    `KeyError` instead.
  - `with_` returns a new registry that has the extra resource in front.
- `MutableResourceRegistry` adds `insert`, `try_insert`, `remove` and `clear`.
  `insert` returns the resource of the same type that it replaced, or `None`.
- **`streamecs.resource_bundle`**: functions that work on several resources at
  once. A bundle is one resource, or a non-empty tuple of bundles.
  - The functions are `bundle_contains`, `insert_bundle`, `try_insert_bundle`,
    `remove_bundle`, `get_bundle`, `provide_bundle` and `with_bundle`.
  - Results have the same shape as the bundle you pass in.
  - `insert_bundle`, `remove_bundle` and `get_bundle` return `None` as soon as
    one part has no value. When that happens, the parts after it are not
    touched.
  - An empty tuple raises `ValueError`.
- **`streamecs.dependency`**: containers take inputs one at a time and then
  `flush()` them into a dependency.
  - `TypeContainer(kind, shared=False)` keeps the first input whose type is
    exactly `kind`. If no such input arrived, it raises
    `InputTypeMismatchError`.
  - `SequenceContainer(*containers)` offers each input to its containers in
    order and flushes them into a tuple.
  - `OptionalContainer(inner)` passes every input and the flush on to `inner`.
  - `UnitContainer` refuses every input and flushes into `()`.
  - `dependency_from_iter(container, iterable)` feeds every input to the
    container and flushes it.

## Installation

```
pip install streamecs
```

## Examples

Entity keys:

```python
from streamecs.entity import DefaultEntity

entity = DefaultEntity.with_(42, 127)
assert (entity.index, entity.generation) == (42, 127)
assert str(entity) == "42v127"
assert DefaultEntity.null().is_null()
assert not DefaultEntity(0, 0).is_null()
```

Resources are looked up by type:

```python
from dataclasses import dataclass

from streamecs.resources import MutableResourceRegistry


@dataclass
class Gravity:
    value: float


resources = MutableResourceRegistry()
assert resources.insert(Gravity(9.8)) is None
assert resources.get(Gravity).value == 9.8
assert resources.remove(Gravity) == Gravity(9.8)
assert resources.get(Gravity) is None
```

Bundles of resources:

```python
from streamecs.resource_bundle import get_bundle, with_bundle
from streamecs.resources import ResourceRegistry

resources = with_bundle(ResourceRegistry(), (1, "text"))
assert get_bundle(resources, (int, str)) == (1, "text")
assert get_bundle(resources, (int, float)) is None
```

Dependencies gathered from a stream of values:

```python
from streamecs.dependency import SequenceContainer, TypeContainer, dependency_from_iter

container = SequenceContainer(TypeContainer(int), TypeContainer(str))
assert dependency_from_iter(container, ["a", 1.5, 7]) == (7, "a")
```

## What it does not do

This package only has entity keys. It has nothing that creates, tracks or
destroys entities, and no storage for components attached to entities. There is
no world object tying these pieces together, and no system scheduler. Resource
registries live in memory only; nothing is saved anywhere.

## Running the tests

```
pip install -e ".[test]"
pytest
```