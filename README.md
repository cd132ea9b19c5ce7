# plaquette

Small building blocks for interactive and generative projects. The package
maps values between ranges and wraps them around an interval. It also has fast
integer trigonometry, easing curves, oscillator wave shapes, uniform random
numbers and two list containers with fixed growth rules.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `plaquette.wrap` has three functions:
  - `wrap01(x)` keeps a value inside `[0, 1)` by wrapping it around.
  - `wrap(x, high)` wraps into `[0, high)`. When `high` is negative it wraps into `[high, 0)`, and when `high` is `0` it returns `0`.
  - `wrap_between(x, low, high)` wraps into `[low, high)`.
- `plaquette.mapping` re-maps numbers between ranges:
  - `map_float(value, from_low, from_high, to_low, to_high, mode)` re-maps a number from one range to another.
  - `map_from01(value, to_low, to_high, mode)` re-maps from `[0, 1]`.
  - `map_to01(value, from_low, from_high, mode)` re-maps to `[0, 1]`.
  - `MapMode` chooses what happens to the result. `UNCONSTRAIN` leaves it as it is, `CONSTRAIN` clamps it to the target range, and `WRAP` wraps it around the target range.
  - When the source range is empty, `map_float` returns the middle of the target range and `map_to01` returns `0.5`.
  - `constrain(value, low, high)` clamps a value.
- `plaquette.trig8` gives integer approximations of sine and cosine:
  - `sin16` and `cos16` take a 16-bit angle (`0..65535`) and return a value in `-32767..32767`.
  - `sin8` and `cos8` take an 8-bit angle and return a value in `0..255`.
- `plaquette.fastmath` has quick approximations built on the functions above. `fast_sin` and `fast_cos` take radians. `fast_sqrt` returns a tiny positive number for `0`. `fast_pow` works on the exponent bits of a double.
- `plaquette.osc_utils` works with 32-bit phase time, which covers one period of an oscillator:
  - It defines the constants `PHASE_TIME_MAX` and `HALF_PHASE_TIME_MAX`.
  - The functions are `float_to_phase_time`, `phase_time_to_float`, `time_to_phase`, `phase_time_add_phase`, `phase_time_add_time` and `phase_time_update`.
  - `phase_time_update(phase_time, period, sample_rate)` returns a tuple: the new phase time, and whether it wrapped past the end of the period.
- `plaquette.easing` has the easing curves `ease_none`, `ease_in_sine`, `ease_out_sine` and `ease_in_out_sine`. It also has the in/out/in-out variants for quad, cubic, quart, quint, expo, circ, back, elastic and bounce. Each curve maps `t` in `[0, 1]` to an eased progression.
- `plaquette.waveshapes` has `sine_wave_value(t, width)`, `square_wave_value(t, width)` and `triangle_wave_value(t, width)`. Each gives a wave's value in `[0, 1]` at phase time `t`, and `width` is also a phase time.
- `plaquette.randomness` has `random_float()`, `random_float(a)` and `random_float(a, b)`, which return a uniform number in `[0, 1)`, `[0, a)` and `[a, b)`. `random_uniform` is an alias.
- `plaquette.arraylist_core` and `plaquette.arraylist` provide `ArrayList`, a list that has a capacity:
  - With `SizeType.DYNAMIC` the capacity grows by half as needed. With `SizeType.FIXED` it raises `OverflowError` when an item does not fit.
  - Out-of-range indexes raise `IndexError`.
  - `ArrayList` can be sorted with a comparator using `SortAlgorithm.BUBBLE_SORT` or `SortAlgorithm.QUICK_SORT`.
  - It also offers `sublist`, `clone`, `ensure_capacity`, `trim_to_size`, `replace_all`, `for_each` and `to_list`.
- `plaquette.hybrid_array_list` provides `HybridArrayList`, a list that fills a static block first and then grows a dynamic block. Its `get` and `[]` clamp the index to the valid range, and raise `IndexError` only when the list is empty.

## Example

```python
from plaquette.mapping import MapMode, map_float
from plaquette.easing import ease_in_out_sine
from plaquette.wrap import wrap_between

map_float(5, 0, 10, 0, 100, MapMode.UNCONSTRAIN)   # 50.0
map_float(20, 0, 10, 0, 100, MapMode.CONSTRAIN)    # 100.0
wrap_between(370, 0, 360)                           # 10.0
ease_in_out_sine(0.5)                               # 0.5
```

```python
from plaquette.arraylist import ArrayList

items = ArrayList()
for value in (3, 1, 2):
    items.add(value)
items.sort(lambda a, b: a > b)
items.to_list()                                     # [1, 2, 3]
```

## What it does not do

The package gives wave shapes as plain functions of phase time. It has no
oscillator objects that advance with a clock. It has no run loop, no
smoothing filters and no input or output units for serial streams or sensors.
To drive a wave over time, call `phase_time_update` and a wave-shape function
from your own loop.