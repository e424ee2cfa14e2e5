import matplotlib.pyplot as plt
from scripts.run_survey import rows, SAMPLES

xs = [r["order"] for r in rows]
proper = [r["pct_proper"] for r in rows]
assoc = [r["pct_associative"] for r in rows]
comm = [r["pct_commutative"] for r in rows]

plt.figure(figsize=(6, 4))
plt.plot(xs, proper, marker="o", label="has proper subquasigroup")
plt.plot(xs, assoc, marker="s", label="associative (group)")
plt.plot(xs, comm, marker="^", label="commutative")
plt.xticks(xs)
plt.ylim(0, 100)
plt.xlabel("Order n")
plt.ylabel(f"% of {SAMPLES} random quasigroups")
plt.title("Sequential replacement graph quasigroups")
plt.legend()
plt.grid(True, alpha=0.3)
plt.show()
