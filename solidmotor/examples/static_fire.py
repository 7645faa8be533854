#!/usr/bin/env python
"""Static fire example for solidmotor.

Fires the stock KNSB BATES motor, then the same motor in a casing with a
wall that is far too thin, and compares the outcomes:

1. Run the stock motor to burnout
2. Print the performance summary and the first history samples
3. Thin the casing wall to 0.5 mm and fire again (CATO expected)
4. Drive a simulation by hand, the way a render loop would
"""

from solidmotor import (
    CasingPatch,
    ConfigPatch,
    LifecyclePhase,
    MotorSimulation,
    configure_logging,
    default_config,
    format_burn_summary,
    merge_config,
    run_burn,
)


def main() -> None:
    """Run the static fire example."""
    configure_logging("INFO")

    print("=" * 70)
    print("solidmotor - Static Fire Example")
    print("=" * 70)
    print()

    # =========================================================================
    # Step 1: Stock motor
    # =========================================================================

    print("Step 1: Firing the stock motor...")
    stock = run_burn(dt=0.01)
    print(format_burn_summary(stock))
    print()
    print(stock.to_dataframe().head(10))
    print()

    # =========================================================================
    # Step 2: Thin casing
    # =========================================================================

    print("Step 2: Firing with a 0.5 mm casing wall...")
    thin = merge_config(default_config(), ConfigPatch(casing=CasingPatch(wall_thickness=0.0005)))
    failed = run_burn(thin, dt=0.01)
    print(format_burn_summary(failed))
    print()

    # =========================================================================
    # Step 3: Manual loop
    # =========================================================================
    #
    # A renderer owns the loop and clamps its frame time before stepping.

    print("Step 3: Manual stepping at 60 Hz...")
    sim = MotorSimulation()
    sim.ignite()
    frame_dt = 1.0 / 60.0
    while sim.phase is LifecyclePhase.BURNING:
        snapshot = sim.step(min(frame_dt, 0.05))
    print(
        f"  {snapshot.phase.name} after {snapshot.time:.2f} s, "
        f"progress {snapshot.burn_progress:.0%}, "
        f"{len(snapshot.history)} history samples"
    )


if __name__ == "__main__":
    main()
