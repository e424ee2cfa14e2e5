import pathlib
import numpy as np
from quasigroups.data import sequential_replacement_dataset
from quasigroups.metrics import count_latin_squares
from quasigroups.tables import write_results

SEED = 42
ORDERS = range(2, 9)
SAMPLES = 25
OUT_DIR = pathlib.Path("dataset")

rng = np.random.default_rng(SEED)
OUT_DIR.mkdir(parents=True, exist_ok=True)

for n in ORDERS:
    print(f"Generating {SAMPLES} sequential replacement tables (n={n})...")
    tables = sequential_replacement_dataset(n, SAMPLES, rng=rng)
    count_latin_squares(tables)
    for t, T in enumerate(tables):
        write_results(OUT_DIR / f"srg_n{n}_{t:03d}.txt", T)

print(f"Saved dumps to '{OUT_DIR}/'")
