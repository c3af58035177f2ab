# logicgraph

This package provides reactive logical building blocks for entity graphs.
An entity is a set of observable properties. A behaviour attached to an
entity keeps its output properties in step with its inputs:

- logical gates (`logicgraph.gates.LOGICAL_GATES`): `and`, `nand`, `nor`, `or`, `xor`, `xnor`
- logical operations (`logicgraph.operations.LOGICAL_OPERATIONS`): `not`
- actions (`logicgraph.actions`): `IfThenElseFactory`, `ToggleFactory`, `TriggerFactory`

The package has no dependencies outside the standard library.

## Installation

```
pip install logicgraph
```

## Modules

- `logicgraph.reactive` defines the type identifiers (`ComponentTypeId`,
  `EntityTypeId`, `BehaviourTypeId`, `FlowTypeId`, `EntityBehaviourTypeId`).
  It also has `ReactiveEntityInstance` with its builder, and
  `PropertyObserverContainer`. Setting a property calls every observer
  registered for it. Setting a property the instance does not have is
  ignored.
- `logicgraph.components` holds the property enums and component types. It
  also has typed views onto an instance: `Action`, `Condition`,
  `LogicalGate` and `LogicalOperation`.
- `logicgraph.entities` holds the entity and behaviour types for `and3`,
  `if_then_else`, `toggle` and `trigger`. It also has the views `And3`,
  `IfThenElse`, `Toggle` and `Trigger`.
- `logicgraph.behaviour` defines the `EntityBehaviour` lifecycle, the
  `EntityBehaviourFactory` and the `BehaviourError` exceptions.
- `logicgraph.gates`, `logicgraph.operations` and `logicgraph.actions`
  hold the concrete behaviours and their factories.
- `logicgraph.plugin` has `LogicalPlugin`, `PluginContext`,
  `EntityBehaviourRegistry`, `get_dependencies()` and `construct_plugin()`.
- `logicgraph.deploy` contains the deployment helper, described below.

## Example: an AND gate

```python
from logicgraph.reactive import (
    BehaviourTypeId,
    EntityTypeId,
    ReactiveEntityInstanceBuilder,
)
from logicgraph.components import LogicalGate, LogicalGateProperties
from logicgraph.gates import LOGICAL_GATES, LogicalGateFactory

instance = (
    ReactiveEntityInstanceBuilder(EntityTypeId("logical", "and"))
    .property(LogicalGateProperties.LHS, False)
    .property(LogicalGateProperties.RHS, False)
    .property(LogicalGateProperties.RESULT, False)
    .build()
)

gate = LogicalGate(instance)
behaviour_ty = BehaviourTypeId("logical", "and")
factory = LogicalGateFactory(behaviour_ty, LOGICAL_GATES[behaviour_ty])

with factory.create(instance):
    gate.lhs(True)
    gate.rhs(True)
    assert gate.result() is True
```

`create` does three things in order:

1. It checks that the instance has every property the behaviour needs. If one is missing, it raises `BehaviourValidationFailed`.
2. It computes the initial result. If an input is not a boolean, it raises `BehaviourInitializationFailed`.
3. It attaches the behaviour's observers.

The behaviour stops updating the instance when its `with` block ends.
Outside a `with` block, call `disconnect()` yourself.

## Actions

- **if_then_else**: copies `then_payload` or `else_payload` to `result`,
  depending on the boolean `condition`.
- **toggle**: flips the boolean `result` each time `trigger` is set to `True`.
  If `result` is not a boolean, it becomes `False`.
- **trigger**: copies `payload` to `result` each time `trigger` is set to `True`.

The `Toggle` and `Trigger` views have a `trigger()` method, which sets the
`trigger` property to `True`.

## Plugin

`construct_plugin()` returns a `LogicalPlugin` that has no context. Give it
a `PluginContext` with `set_context`.

- `activate()` registers a factory for every behaviour listed above in the
  context's `EntityBehaviourRegistry`.
- `deactivate()` removes those factories again.
- Both methods do nothing while the plugin has no context.

`get_dependencies()` lists the plugins this one needs, as `PluginDependency`
values.

## Deployment helper

```
logicgraph-deploy --out-dir build/out
```

The command first reads a deployment file. By default this is
`.deployment.toml`; choose another with `--config`. If you leave out
`--out-dir`, the command uses the `CRATE_OUT_DIR` environment variable.

For each directory listed under `target_dirs`, the command copies every
`libinexor_rgf_plugin_*.*` file in the output directory that ends in `.so` or
`.dll`. It prints one line for each copy. Copies that fail are skipped.

If the deployment file cannot be read or parsed, the command reports this on
stderr and exits with status 0.

The same steps are available from Python as `load_deployment(path)` and
`deploy(out_dir, config_path)`.

## What this package does not do

This package does not contain the definitions of component types, entity
types or flow types, so it has no providers for them. It has no host
application that loads plugins. `PluginContext` only carries an
`EntityBehaviourRegistry`. The `and3` entity has a typed view but no
behaviour.

## Running the tests

```
pip install -e ".[test]"
pytest
```