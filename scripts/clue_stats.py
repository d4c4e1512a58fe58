import argparse
import json
import sys
from collections import Counter
from pathlib import Path

from tqdm import tqdm

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))
from sudoku_gen.generator import generate_puzzles


def main():
    parser = argparse.ArgumentParser(description="Distribution of clue counts over generated puzzles")
    parser.add_argument("--num-puzzles", type=int, default=1000, help="Number of puzzles to generate")
    parser.add_argument("--puzzle-size", type=int, default=4)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--save-json", type=str, default=None, help="Path to save results JSON")
    args = parser.parse_args()

    print(f"Generating {args.num_puzzles} puzzles ({args.puzzle_size}x{args.puzzle_size}), seed={args.seed}...")
    clues: Counter[int] = Counter()
    puzzles = generate_puzzles(args.num_puzzles, n=args.puzzle_size, seed=args.seed)
    for puzzle in tqdm(puzzles, total=args.num_puzzles):
        clues[puzzle.num_clues] += 1

    print("-" * 30)
    print(f"{'Clues':<10} | {'Puzzles':<10}")
    print("-" * 30)
    for count in sorted(clues):
        print(f"{count:<10} | {clues[count]}")
    print("-" * 30)

    total = sum(clues.values())
    mean = sum(k * v for k, v in clues.items()) / total if total else 0.0
    print(f"Mean clues: {mean:.2f}")

    if args.save_json:
        results = {"mean": mean, "histogram": {str(k): v for k, v in sorted(clues.items())}}
        with open(args.save_json, "w") as f:
            json.dump(results, f, indent=2)
        print(f"Results saved to {args.save_json}")


if __name__ == "__main__":
    main()
