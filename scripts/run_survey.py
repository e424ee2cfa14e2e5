import numpy as np
from quasigroups.survey import survey_orders, print_survey

SEED = 42
ORDERS = range(2, 13)
SAMPLES = 50

rng = np.random.default_rng(SEED)

print(f"Surveying {SAMPLES} random quasigroups per order, n in {ORDERS.start}..{ORDERS.stop - 1}\n")
rows = survey_orders(ORDERS, samples=SAMPLES, rng=rng)
print_survey(rows)
