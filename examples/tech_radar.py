"""Example: lay out a small technology radar and print blip coordinates."""

from radar_layout import RadarConfig, SimulationOptions, config_from_mapping, layout_radar

DOCUMENT = {
    "quadrants": [
        {"name": "Languages"},
        {"name": "Infrastructure"},
        {"name": "Datastores"},
        {"name": "Data Management"},
    ],
    "rings": [
        {"name": "ADOPT", "color": "#5ba300"},
        {"name": "TRIAL", "color": "#009eb0"},
        {"name": "ASSESS", "color": "#c7ba00"},
        {"name": "HOLD", "color": "#e09b96"},
    ],
    "entries": [
        {"label": "Python", "quadrant": 0, "ring": 0, "active": True, "moved": 1},
        {"label": "Kotlin", "quadrant": 0, "ring": 0, "active": True},
        {"label": "Scala", "quadrant": 0, "ring": 3, "active": True, "moved": -1},
        {"label": "Kubernetes", "quadrant": 1, "ring": 0, "active": True},
        {"label": "Nomad", "quadrant": 1, "ring": 2, "active": False},
        {"label": "PostgreSQL", "quadrant": 2, "ring": 0, "active": True},
        {"label": "Cassandra", "quadrant": 2, "ring": 3, "active": True},
        {"label": "Kafka", "quadrant": 3, "ring": 0, "active": True, "description": "Event streaming"},
        {"label": "Airflow", "quadrant": 3, "ring": 1, "active": True},
    ],
}


def main() -> None:
    config: RadarConfig = config_from_mapping(DOCUMENT)
    layout = layout_radar(config, SimulationOptions(max_ticks=200))

    print(f"Ticks: {layout.report.ticks} (converged={layout.report.converged})")
    print(f"Max overlap: {layout.report.max_overlap:.3f}")
    for quadrant, style in enumerate(config.quadrants):
        print(style.name)
        for ring in range(4):
            for entry in layout.legend(quadrant, ring):
                print(
                    f"  {entry.display_id}. {entry.label:<12} "
                    f"{config.rings[ring].name:<7} ({entry.x:8.2f}, {entry.y:8.2f}) {entry.color}"
                )


if __name__ == "__main__":
    main()
