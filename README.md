# settlesim

A small turn-based simulation. Settlements (villages, cities and metropolises) run
plans that build facilities chosen from a shared catalogue. Each plan follows a
selection policy. When a facility becomes operational, its scores are added to the
plan's life-quality, economy and environment scores.

## Installation

```
pip install .
```

## Running

Start the interactive simulation with a configuration file:

```
settlesim config_file.txt
```

If you do not pass exactly one argument, the program prints
`usage: simulation <config_path>` and exits. If the configuration file cannot be
opened, it prints a message to standard error and exits with status 1.

### Configuration file

Each line is one entry, with fields separated by whitespace. Blank lines and lines
whose first word is `#` are skipped. Any other unrecognised first word is ignored.

```
# name type(0=village, 1=city, 2=metropolis)
settlement KfarSPL 0
settlement Metropolin 2

# name category(0=life quality, 1=economy, 2=environment) price lifeQ eco env
facility Hospital 0 5 5 3 1
facility Market 1 3 1 4 1
facility Park 2 2 2 0 4

# settlement policy
plan KfarSPL eco
```

A settlement or facility whose name is already taken is ignored. Loading raises
`ValueError` in these cases: an unknown type, category or policy, a non-numeric
score, or a plan for a settlement that does not exist.

### Commands

After it starts, the simulation prints `enter next command` and reads one command
per line. It stops after `close` or when the input runs out.

| Command | Meaning |
| --- | --- |
| `step <n>` | advance every plan by `n` steps |
| `plan <settlement> <policy>` | add a plan for an existing settlement |
| `settlement <name> <0\|1\|2>` | add a settlement |
| `facility <name> <category> <price> <lifeQ> <eco> <env>` | add a facility to the catalogue |
| `planStatus <id>` | print a plan's full status |
| `changePolicy <id> <policy>` | switch a plan to a different selection policy |
| `log` | print every action recorded so far, with its status |
| `backup` | keep a snapshot of the simulation |
| `restore` | go back to the last snapshot |
| `close` | print each plan's summary and stop |

Other input, or a command with the wrong number of words, prints
`unknown command`. A command that fails prints `ERROR: <message>`. Examples are
an existing name, an unknown plan, or changing a plan to the policy it already has.
Every action except `close` and a failed `restore` goes into the log with the
status `COMPLETED` or `ERROR`.

Plan ids are given in order, starting at 0.

### Policies

- `nve`: goes through the catalogue in order and starts again at the beginning.
- `bal`: picks the facility with the smallest difference between its highest and
  lowest score.
- `eco`: goes through the economy facilities only.
- `env`: goes through the environment facilities only.

A settlement can have as many facilities under construction as its type allows:
one for a village, two for a city and three for a metropolis. A facility takes as
many steps to build as its price.

## Using it from Python

```python
from settlesim.simulation import Simulation

sim = Simulation()
sim.load_config([
    "settlement KfarSPL 1",
    "facility Market 1 2 1 3 0",
    "facility Park 2 1 0 0 2",
    "plan KfarSPL nve",
])
sim.execute("step 3")
sim.execute("planStatus 0")
print(sim.get_plan(0).economy_score)
```

- `Simulation.from_config(path)` builds a simulation from a file.
- `Simulation.start(lines)` runs the command loop over any iterable of lines. With
  no argument, it reads standard input.
- `Simulation.execute(line)` runs one command and returns the action it ran, or
  `None`.

The building blocks are in these modules:

- `settlesim.settlement`: `Settlement`, `SettlementType`.
- `settlesim.facility`: `FacilityType`, `Facility`, `FacilityCategory`,
  `FacilityStatus`.
- `settlesim.selection_policy`: the policies, plus `policy_from_name` and
  `is_policy_name`.
- `settlesim.plan`: `Plan`, `PlanStatus`.
- `settlesim.actions`: one class per command.

## Limitations

- Snapshots from `backup` live in memory only. Nothing is saved to disk, and a
  snapshot is lost when the program exits.
- Some input stops the program with a `ValueError` instead of an `ERROR:` line:
  - non-numeric numbers in commands;
  - an unknown settlement type or facility category;
  - stepping a plan that has nothing to choose from. This happens when the
    catalogue is empty, or when an `eco` or `env` plan has no facility of its
    category.

## Running the tests

```
pip install .[test]
pytest
```