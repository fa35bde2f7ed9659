import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import app as app_module
from app_tabs.overview.filters import default_filters
from data_layer.base import load_dataset


def main():
    # Embedded dataset only; no server run
    dataset = load_dataset(None)
    dash_app = app_module.create_dashboard(dataset)
    # Access layout to ensure it builds
    _ = dash_app.layout
    result = app_module.recompute(dataset, default_filters(dataset))
    assert set(result["figures"]) == {"trend", "bar", "pie", "area", "treemap"}
    print("SMOKE_OK")


if __name__ == "__main__":
    main()
