# hpcmat

Small typed matrix and image containers backed by NumPy, plus the helpers
that go with them: element-wise and matrix arithmetic, random fill, PGM/PPM
reading and writing, border replication, channel split and merge, grey
conversion, PSNR, and a millisecond timer for benchmarking loops.

## Installing

```
pip install .
```

Install the `test` extra (`pip install .[test]`) to run the test suite with
`pytest`.

## Matrices

A `Mat` (in `hpcmat.mat`) holds a row-major 2-D array of one element
`Depth`: `U8` (8-bit unsigned), `S16`, `S32` (signed integers), `F32` or
`F64` (floating point). A new matrix is zero-filled unless `data` is given.

```python
from hpcmat.mat import Depth, Mat
from hpcmat.mat_ops import mat_add, mat_mul, mat_rand, mat_show

a = Mat(3, 3, Depth.F32)
b = Mat(3, 3, Depth.F32)
mat_rand(a, 0, 100)
mat_rand(b, 0, 100)

c = mat_add(mat_mul(a, b), b)
mat_show(c)

ints = c.convert(Depth.S32)
print(ints.format())
```

`Mat` offers `convert(depth)` (floating values truncate, integers wrap),
`copy()`, `index(row, col)` for the flat row-major offset, `format()` and
`show()`.

In `hpcmat.mat_ops`:

- `mat_zero`, `mat_one` and `mat_rand(m, low, high, rng=None)` fill a matrix
  in place. `mat_rand` draws `low + u * (high - low + 1)`; integer depths
  truncate it, giving values in `[low, high]`.
- `mat_add` and `mat_mul` take either a scalar or another matrix; `mat_mul`
  with a matrix is the matrix product. `mat_div` divides by a scalar
  (integer depths truncate toward zero and raise `ZeroDivisionError` for a
  zero divisor).
- Integer results wrap around to the matrix depth.
- A shape mismatch raises `ValueError`; matrices of different depths raise
  `TypeError`.

Single random values come from `hpcmat.randvals`: `rand_8u`, `rand_16s`,
`rand_32s`, `rand_32f` and `rand_64f`, each taking `low`, `high` and an
optional `random.Random`.

## Timing

```python
from hpcmat.timer import CalcTime

t = CalcTime()
for _ in range(10):
    with t:
        work()
print(t.last_time(), "ms")
print(t.avg_time(), "ms average")
```

`start()` and `end()` can be called directly instead of using the `with`
block. `avg_time(drop_first=True, clear=True)` leaves out the first
measurement and clears the record by default; it raises `ValueError` when
there are too few measurements, as does `last_time()` when nothing has been
measured. `end()` before `start()` raises `RuntimeError`.

## Images

An `Image` (in `hpcmat.image`) stores interleaved channels as a
`rows x cols x channels` array of one `Depth`, with `convert(depth)`
(converting to `U8` saturates to 0..255), `copy()` and
`pixel(row, col, channel=0)`.

```python
from hpcmat.image_util import (
    calc_psnr, copy_make_border, cvt_color_gray, merge, read_pxm, split, write_pxm,
)

img = read_pxm("input.ppm")
gray = cvt_color_gray(img)
padded = copy_make_border(gray, 2, 2, 2, 2)
planes = split(img)
again = merge(planes)
print(calc_psnr(img, again))
write_pxm("gray.pgm", gray)
```

- `read_pxm` reads grey (P2/P5) and colour (P3/P6) files, skipping header
  comments; `write_pxm` writes 8-bit images as binary P5 or P6.
- `copy_make_border` replicates edge pixels into the new margins.
- `cvt_color_gray` averages the three channels of a colour image.
- `split` and `merge` convert between one multi-channel image and a list of
  single-channel images.
- `image_zero`, `image_one` and `image_rand` fill an image in place;
  `image_info` prints its shape and depth.
- `calc_psnr` returns the PSNR in dB for a peak of 255, infinity for
  identical images, and raises `ValueError` when sizes or channel counts
  differ.

## What it does not do

The package is a library only: it has no command-line program, and it does
not provide filters such as a box filter or ready-made benchmark exercises.
Those are left to code built on top of these containers.