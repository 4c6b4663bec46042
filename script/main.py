"""Entry point: load a signal JSON, apply the filter chain, print a summary, plot, export."""
import argparse
import warnings
from pathlib import Path

from filtchain import DesignError, FilterConfig, FilterOrderWarning, InvalidParameterError, filter_pipeline
from filtchain.data import load_signal, load_specs
from filtchain.export_viz import build_filter_payload, export_filter_json
from filtchain.viz import plot_filtered_signal


def main() -> None:
    parser = argparse.ArgumentParser(description="Zero-phase Butterworth / notch filter chain")
    parser.add_argument(
        "file",
        help='Path to signal JSON: {"samples": [...], "fs": Hz, "filters": [...]}',
    )
    parser.add_argument(
        "--filters",
        type=str,
        default=None,
        metavar="PATH",
        help="JSON list of filters (overrides the 'filters' in the signal file)",
    )
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        help="Show the frequency response of every filter stage",
    )
    parser.add_argument(
        "--no-plot",
        action="store_true",
        help="Skip opening/saving the raw vs filtered plot",
    )
    parser.add_argument(
        "--save",
        type=str,
        default=None,
        help="Save the raw vs filtered plot to this path",
    )
    parser.add_argument(
        "--export",
        type=str,
        default=None,
        metavar="PATH",
        help="Export filtered signal and filter coefficients to JSON",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip precondition checks on fs, cutoffs, orders and notch radius",
    )
    args = parser.parse_args()

    samples, fs, specs = load_signal(args.file)
    if args.filters:
        specs = load_specs(args.filters)
    config = FilterConfig(validate=not args.no_validate)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", FilterOrderWarning)
        try:
            filtered, results = filter_pipeline(samples, fs, specs, diagnostics=args.diagnostics, config=config)
        except (DesignError, InvalidParameterError) as e:
            raise SystemExit(f"Filtering failed: {e}") from e
    for w in caught:
        if issubclass(w.category, FilterOrderWarning):
            print(f"Warning: {w.message}")
        else:
            warnings.showwarning(w.message, w.category, w.filename, w.lineno)

    print(f"Samples: {len(samples)}  fs: {fs:g} Hz  Filters: {len(specs)}")
    for i, result in enumerate(results):
        d = result.to_dict()
        if d["coef_num"] is None:
            print(f"  [{i}] none")
            continue
        extra = f"type={d['type']}" if d["type"] is not None else f"b={d['b']}"
        print(f"  [{i}] {d['name']}  {extra}  n={d['n']}  fc={d['fc']}")
    if len(filtered) == 0 and specs:
        print("Signal too short for the filter order(s); filtered output is empty.")

    if not args.no_plot:
        out = Path(args.save) if args.save else None
        plot_filtered_signal(samples, filtered, fs, title=Path(args.file).stem, output_path=out)

    if args.export:
        payload = build_filter_payload(samples, filtered, fs, results, config=config)
        export_filter_json(payload, Path(args.export))
        print(f"Exported filter JSON to {args.export}")


if __name__ == "__main__":
    main()
