# File: demos/run_beam_design.py
"""
FORMAL DEMO: FLOOR BEAM DESIGN
==============================

PURPOSE:
--------
This demo walks through one complete design pass for a simply supported
floor beam and compares candidate sections. It demonstrates:

1. How raw load input is normalised into a LoadSet
2. How a catalog section is looked up and built up from parallel members
3. How capacity, analysis and checks come together in run_design()
4. How to read the summary table and the controlling load case

PHYSICAL PROBLEM:
----------------
A 5.4 m floor beam in a house carries joists at 450 centres over a 2.4 m
tributary width (0.5 kPa dead, 1.5 kPa live), a partition wall line load
over part of the span, and a point load from a post above.

We want to know:
- Which section works?
- Which load combination governs strength?
- How close is each check to its limit?
"""

import matplotlib.pyplot as plt

from beam_design import DesignInputs, LoadSet, run_design
from beam_design.logging import configure_logging
from beam_design.report import summary_table


SPAN = 5.4  # m

CANDIDATES = [
    ("240x45 MGP10", 2),
    ("300x45 LVL 13", 2),
    ("200UB25.4", 1),
    ("250UB31.4", 1),
]


def build_loads(span):
    """Loads as they would arrive from a form: plain dicts."""
    return LoadSet.from_raw(
        udls=[{"id": "wall", "start": 1.2, "finish": 3.6, "dead": 1.8, "live": 0.0}],
        point_loads=[{"id": "post", "location": 3.0, "dead": 4.0, "live": 6.0}],
        moments=[],
        tributary={
            "tributary_width": 2.4,
            "dead_pressure": 0.5,
            "live_pressure": 1.5,
            "include_self_weight": True,
        },
        span=span,
    )


def main():
    configure_logging("INFO")

    print("=" * 70)
    print(f"FLOOR BEAM DESIGN: {SPAN} m simply supported")
    print("=" * 70)
    print()

    loads = build_loads(SPAN)
    utilisation = {}

    for designation, members in CANDIDATES:
        outcome = run_design(DesignInputs(
            span=SPAN,
            members=members,
            usage="Normal",
            designation=designation,
            loads=loads,
        ))
        label = f"{members} x {designation}" if members > 1 else designation

        print(f"{label}")
        print("-" * 70)
        print(f"  φM = {outcome.capacity.phi_m:.1f} kNm   ({outcome.capacity.moment_details})")
        print(f"  φV = {outcome.capacity.phi_v:.1f} kN    ({outcome.capacity.shear_details})")
        print(f"  Self-weight:         {outcome.analysis.self_weight:.3f} kN/m")
        print(f"  Controlling moment:  {outcome.analysis.controlling_moment_case}")
        print(f"  Controlling shear:   {outcome.analysis.controlling_shear_case}")
        print()

        table = summary_table(outcome.checks)
        print(table.to_string(index=False))
        print()
        print(f"  Overall: {'✓ PASS' if outcome.checks['overall_pass'] else '✗ FAIL'}")
        print()

        utilisation[label] = table.set_index('check')['ratio']

    # ========================================================================
    # VISUALIZE UTILISATION
    # ========================================================================
    fig, ax = plt.subplots(figsize=(12, 6))
    width = 0.8 / len(utilisation)
    checks = list(next(iter(utilisation.values())).index)

    for i, (label, ratios) in enumerate(utilisation.items()):
        xs = [j + i * width for j in range(len(checks))]
        ax.bar(xs, ratios.fillna(0.0).values, width=width, label=label)

    ax.axhline(y=1.0, color='r', linestyle='--', linewidth=1, label='Limit')
    ax.set_xticks([j + 0.4 - width / 2 for j in range(len(checks))])
    ax.set_xticklabels(checks, rotation=15)
    ax.set_ylabel('Utilisation (action / limit)')
    ax.set_title(f'Candidate sections, {SPAN} m span')
    ax.legend(loc='best', fontsize=9)
    ax.grid(True, axis='y', alpha=0.3)

    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
