"""Example: hazard analysis for the preset regions

This script walks through the complete workflow:

1. Synthetic daily observations for each preset region (1990-2020)
2. Event detection for all four hazard kinds
3. Yearly aggregation and trend classification
4. Key-finding text, recent vs. earlier comparison and CSV export
5. Yearly frequency/intensity chart for one region
"""

import os
import sys

import matplotlib.pyplot as plt

# Get the absolute path to the parent directory
parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(parent_dir)

from climate_hazards import (
    HazardKind,
    analyze,
    analysis_area_km2,
    compare_recent_to_earlier,
    detect_events,
    estimated_elevation_m,
    export_filename,
    export_yearly_csv,
    generate_synthetic_observations,
    plot_hazard_events,
    plot_yearly_hazard,
    preset_regions,
    set_report_style,
    summarize_insights,
)

START_YEAR = 1990
END_YEAR = 2020


def main():
    """Run the hazard analysis for every preset region and hazard kind."""
    print("=" * 70)
    print(f"Climate hazard analysis {START_YEAR}-{END_YEAR}")
    print("=" * 70)

    output_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "output")
    os.makedirs(output_dir, exist_ok=True)

    for region in preset_regions():
        print(f"\n[{region.name}] generating observations...")
        print(f"  area ~{analysis_area_km2(region):.0f} km2, "
              f"elevation ~{estimated_elevation_m(region):.0f} m (estimated)")
        observations = generate_synthetic_observations(region, START_YEAR, END_YEAR)
        print(f"  {len(observations)} days")

        for kind in HazardKind:
            result = analyze(observations, kind)
            print(f"  {kind.value:15s} events={result.total_events:4d}  "
                  f"intensity={result.average_intensity:4.1f}  "
                  f"duration={result.average_duration:5.1f}  "
                  f"trend={result.trend_direction} ({result.trend_magnitude:+.1f}%)")

        result = analyze(observations, HazardKind.HEATWAVE)
        for line in summarize_insights(result, region, START_YEAR, HazardKind.HEATWAVE):
            print(f"    - {line}")

        comparison = compare_recent_to_earlier(result.yearly_data)
        if comparison is not None and comparison.change_percent is not None:
            print(f"    recent 5-year average {comparison.recent_average:.1f} vs "
                  f"earlier {comparison.earlier_average:.1f} events/year "
                  f"({comparison.change_percent:+.1f}%)")

        path = export_yearly_csv(
            result, os.path.join(output_dir, export_filename(region, START_YEAR, END_YEAR))
        )
        print(f"    yearly table written to {path}")

    # Charts for the first region
    region = preset_regions()[0]
    observations = generate_synthetic_observations(region, START_YEAR, END_YEAR)
    set_report_style()

    result = analyze(observations, HazardKind.HEATWAVE)
    fig, _ = plot_yearly_hazard(result, HazardKind.HEATWAVE)
    fig.savefig(os.path.join(output_dir, "heatwave_yearly.png"))

    events = detect_events(observations, HazardKind.HEATWAVE)
    fig, _ = plot_hazard_events(observations, events, metric="temperature",
                                title=f"Heatwaves in {region.name}")
    fig.savefig(os.path.join(output_dir, "heatwave_events.png"))
    plt.close("all")

    print("\nDone.")


if __name__ == "__main__":
    main()
