import argparse
import sys
from pathlib import Path

import torch
from torch.utils.data import DataLoader
from tqdm import tqdm

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))
from sudoku_gen.config import load_config, merge_configs
from sudoku_gen.data import PuzzleDataset


def main():
    parser = argparse.ArgumentParser(description="Generate a puzzle dataset and save it as tensors")
    parser.add_argument("--config", type=str, default=None, help="Path to a YAML config file")
    parser.add_argument("--num-samples", type=int, default=None, help="Override dataset.num_samples")
    parser.add_argument("--seed", type=int, default=None, help="Override dataset.seed")
    parser.add_argument("--batch-size", type=int, default=256)
    parser.add_argument("--output", type=str, required=True, help="Path of the .pt file to write")
    args = parser.parse_args()

    overrides = {}
    if args.num_samples is not None:
        overrides["num_samples"] = args.num_samples
    if args.seed is not None:
        overrides["seed"] = args.seed
    config = merge_configs(load_config(args.config), {"dataset": overrides})

    dataset = PuzzleDataset.from_config(config)
    print(f"Generating {len(dataset)} puzzles ({dataset.n}x{dataset.n}), seed={dataset.seed}...")
    loader = DataLoader(dataset, batch_size=args.batch_size)

    inputs, targets = [], []
    for x, y in tqdm(loader):
        inputs.append(x)
        targets.append(y)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    torch.save({"inputs": torch.cat(inputs), "targets": torch.cat(targets), "config": config.to_dict()}, output)
    print(f"Dataset saved to {output}")


if __name__ == "__main__":
    main()
