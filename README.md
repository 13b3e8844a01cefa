# hlsflow

Python models of two small hardware designs and the testbench that drives one of them.

## RGB to YCoCg

`hlsflow.ycocg` converts a pixel from RGB to the YCoCg colour space used by
Display Stream Compression. Chroma is offset into the unsigned range; at 16 bits
per component it is halved so it still fits.

```python
from hlsflow.ycocg import rgb2ycocg_pixel, rgb2ycocg_pixel_sc, convert_stream

pixel = rgb2ycocg_pixel(200, 100, 50, 8)
print(pixel)            # prints "(y, co, cg)"

# The same conversion with 16-bit signed inputs and outputs and 32-bit
# intermediate values, as the hardware block computes it.
hw_pixel = rgb2ycocg_pixel_sc(200, 100, 50, 8)

# Convert a stream of (r, g, b, bits) samples, one pixel per sample.
for p in convert_stream([(1, 2, 3, 8), (4, 5, 6, 8)]):
    print(p.y, p.co, p.cg)
```

`YCoCgPixel` is a frozen dataclass with fields `y`, `co` and `cg`. Both
conversion functions raise `ValueError` for a bit depth they cannot handle.

## Point-to-point multiplier

`hlsflow.dut` models a block that reads 8-bit unsigned values and writes each
one times seven as an 11-bit unsigned value.

```python
from hlsflow.dut import compute, run_dut, to_uint

compute(3)                   # 21
list(run_dut([1, 2, 255]))   # 255 * 7 wraps to 11 bits
to_uint(300, 8)              # 44
```

## Testbench

`hlsflow.testbench` reads a stimulus file, feeds it through the multiplier,
writes the responses, compares them with a golden file and reports latency and
throughput.

```python
from hlsflow.testbench import read_stimulus, simulate, write_responses, compare_results

values = read_stimulus("stimulus.dat")
result = simulate(values, latency=2, interval=1)
write_responses("response.dat", result.responses)
compare_results("response.dat", "golden.dat")
print(result.stats.report(result.last_cycle))
```

`simulate` returns a `SimulationResult` holding the responses, a
`LatencyStats` and the cycle the last value arrived at. Each value is sent
`interval` cycles after the previous one and arrives `latency` cycles after it
was sent.

The same run from the command line:

```
hlsflow-tb --help
hlsflow-tb --stimulus stimulus.dat --golden golden.dat --response response.dat \
           --output-dir . --latency 1 --interval 1
```

Only as many stimulus values as the golden file holds are sent. The response
file goes into `--output-dir`, which defaults to `$BDW_SIM_CONFIG_DIR` or the
current directory. The command prints the statistics and `SIMULATION PASSED`
or `SIMULATION FAILED`, and exits with 0 on a pass and 1 otherwise.

## What it does not do

There is no clocked simulation kernel: timing in the testbench comes only from
the fixed latency and interval given to `simulate`, not from a cycle-by-cycle
model of the design. Nothing here synthesises hardware or writes to a
synthesis tool's performance logs.

## Tests

```
pip install -e .[test]
pytest
```