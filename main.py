"""
Compression Workshop
Step-by-step RLE, Huffman, LZW, Golomb, Arithmetic and Tunstall encoders
"""

import logging
import sys

USAGE = """\
Usage: python main.py --cli <ALGORITHM> <text> [M]
       python main.py --cli <ALGORITHM> --sample
       python main.py --cli <ALGORITHM> --file <path> [M]
       python main.py --cli --compare <text> [M]

Algorithms: HUFFMAN, RLE, GOLOMB, TUNSTALL, ARITHMETIC, LZW
Add --verbose for debug logging."""


def run_compare(args):
    """Print a size summary for every encoder on the same input."""
    from engines.pipeline import compare_all
    
    if not args:
        print(USAGE)
        sys.exit(1)
    text = args[0]
    golomb_m = int(float(args[1])) if len(args) > 1 else 4
    
    results = compare_all(text, golomb_m)
    print(f"Input: {text!r}")
    print(f"\n{'Algorithm':<12}{'Original':>10}{'Compressed':>12}{'Ratio':>10}")
    for algorithm, result in results.items():
        print(f"{algorithm.value:<12}{result.original_size:>10}"
              f"{result.compressed_size:>12}{result.ratio:>9.2f}%")


def run_cli():
    """Run a single encoder from the command line."""
    from models.compression_params import CompressionParams
    from engines.pipeline import compress
    from utils.sample_inputs import ALGORITHM_DETAILS, load_scenario
    from utils.text_io import load_text, format_report
    
    args = [a for a in sys.argv[1:] if a not in ('--cli', '--verbose')]
    
    if not args or args[0] == '--help':
        print(USAGE)
        sys.exit(0)
    
    if args[0] == '--compare':
        run_compare(args[1:])
        return
    
    try:
        params = CompressionParams(algorithm=args[0])
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    rest = args[1:]
    
    if rest and rest[0] == '--sample':
        text, params = load_scenario(params.algorithm)
    elif rest and rest[0] == '--file':
        if len(rest) < 2:
            print(USAGE)
            sys.exit(1)
        print(f"Loading: {rest[1]}")
        text = load_text(rest[1])
        if len(rest) > 2:
            params.golomb_m = int(float(rest[2]))
    elif rest:
        text = rest[0]
        if len(rest) > 1:
            params.golomb_m = int(float(rest[1]))
    else:
        print(USAGE)
        sys.exit(1)
    
    info = ALGORITHM_DETAILS[params.algorithm]
    print(f"{info['name']} ({info['complexity']})")
    print(f"Input: {text!r}")
    
    result = compress(text, params)
    print()
    print(format_report(result, title="Results"))


def main():
    level = logging.DEBUG if '--verbose' in sys.argv else logging.WARNING
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    run_cli()


if __name__ == '__main__':
    main()
