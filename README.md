# labkit

Two small tools in one package:

- a command-line calculator for arithmetic expressions over whole numbers
  with `+`, `-`, `*`, `/` and parentheses;
- simulated sensors (temperature, distance, pressure) that produce random
  readings, and a manager that keeps them by identifier.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The calculator

Run it and type one expression at the prompt:

```
labkit-calc
```

```
Welcome to CLI Calculator!
Enter an expression: (2 + 3) * 4
You entered: (2 + 3) * 4
Trimmed input: (2 + 3) * 4
Result: 20
```

The command reads a single line, evaluates it and exits with status 0. If the
expression cannot be evaluated it prints `Error: <message>` to standard error
and exits with status 1. It takes no options apart from `--help`.

From Python:

```python
from labkit.evaluator import evaluate

evaluate("10 / 4")       # 2.5
evaluate("2 * (3 + 4)")  # 14.0
```

Rules of the language:

- Numbers are runs of decimal digits; there are no decimal points and no
  unary minus.
- Multiplication and division bind tighter than addition and subtraction, and
  operators of equal precedence group from the left.
- Whitespace between tokens is skipped.
- An unrecognised character ends the expression, so whatever follows it is
  ignored. Tokens left over after a complete expression are ignored too
  (`"1 2"` evaluates to `1.0`).

Errors:

- dividing by zero raises `ZeroDivisionError` ("Division by zero");
- a missing closing parenthesis raises `ValueError`
  ("Expected closing parenthesis");
- a token where a number or `(` was expected, including an empty
  expression, raises `ValueError` ("Unexpected token: ...").

The pieces can also be used separately:

```python
from labkit.tokenizer import Tokenizer, TokenType
from labkit.parser import Parser

tokens = Tokenizer("1 + 2").tokenize()
# [Token(NUMBER, "1"), Token(PLUS, "+"), Token(NUMBER, "2"), Token(END, "")]
Parser(tokens).parse_expression()  # 3.0
```

`Tokenizer.tokenize()` always returns a list ending with exactly one
`TokenType.END` token. `Token` is a frozen dataclass with `type` and `value`.

`labkit.calculator.trim` removes ASCII whitespace (space, tab, newline,
carriage return, form feed, vertical tab) from both ends of a string.

## Sensors

```python
import random
from labkit.sensors import TemperatureSensor, DistanceSensor, PressureSensor

temp = TemperatureSensor("TempSensor1")
temp.read()          # a value between 20 and 40 degrees Celsius
temp.last_reading    # the value just read
temp.sensor_id       # "TempSensor1"

repeatable = DistanceSensor("DistSensor1", rng=random.Random(42))
```

- `TemperatureSensor` reads in [20.0, 40.0) °C.
- `DistanceSensor` reads in [0.0, 100.0) metres.
- `PressureSensor` reads in [950.0, 1050.0) hPa.

Every sensor remembers its most recent reading in `last_reading`, which is
0.0 before the first read. Each sensor owns its own random generator; pass a
`random.Random` as `rng` for repeatable readings. `Sensor` is the abstract
base class.

## Managing sensors

```python
from labkit.sensor_manager import SensorManager
from labkit.sensors import TemperatureSensor, DistanceSensor

manager = SensorManager()
manager.add_sensor(TemperatureSensor("TempSensor1"))   # True
manager.add_sensor(DistanceSensor("DistSensor1"))      # True
manager.add_sensor(TemperatureSensor("TempSensor1"))   # False: id taken

manager.get_sensor("XSensor")         # None
manager.sensors()                     # [DistanceSensor('DistSensor1'), TemperatureSensor('TempSensor1')]
manager.read_sensors()                # {"DistSensor1": ..., "TempSensor1": ...}
manager.remove_sensor("TempSensor1")  # True
manager.remove_sensor("TempSensor1")  # False
len(manager)                          # 1
"DistSensor1" in manager              # True
```

Sensors are listed and read in order of their identifiers. A second sensor
with an identifier already in use is not added; the first one stays.

## What it does not do

The sensors are simulations only: they produce random numbers and do not talk
to any device. There is no command for the sensors or the manager, and
readings are not stored anywhere beyond each sensor's last value.