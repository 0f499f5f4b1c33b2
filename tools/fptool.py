#!/usr/bin/env python3
import argparse, logging, sys
from floodpaint.config import DEFAULTS
from floodpaint.engine.solver import solve
from floodpaint.levels import dumps_level, dump_level_pack, format_board, load_level_pack
from floodpaint.mapgen.generator import LevelGenerator
from floodpaint.rng import seed_for_level

def cmd_emit(args):
    gen = LevelGenerator(args.seed)
    board = gen.generate_level(args.rows, args.cols, args.goal, args.target)
    text = dumps_level(board)
    if args.out:
        with open(args.out, 'w', encoding='utf-8') as f:
            f.write(text + "\n")
        print(f"Wrote {args.out}")
    else:
        print(text)

def cmd_pack(args):
    levels = []
    for i in range(args.count):
        gen = LevelGenerator(seed_for_level(args.seed, i))
        levels.append(gen.generate_level(args.rows, args.cols, args.goal, args.target))
    dump_level_pack(levels, args.out)
    print(f"Wrote {len(levels)} levels to {args.out}")

def cmd_show(args):
    levels = load_level_pack(args.path)
    picked = range(len(levels)) if args.index is None else [args.index]
    for i in picked:
        board = levels[i]
        print(f"# level {i}: {board.rows}x{board.cols} goal {board.goal_color}")
        print(format_board(board))
    return 0

def cmd_solve(args):
    board = load_level_pack(args.path)[args.index]
    print(format_board(board))
    result = solve(board, args.max_states)
    if not result.solvable:
        reason = "state cap reached" if result.capped else "no winning sequence"
        print(f"Not solvable ({reason}, explored {result.explored} states)")
        return 1
    print(f"Solvable in {len(result.moves)} moves (explored {result.explored} states):")
    for fr, fc, tr, tc in result.moves:
        print(f"  ({fr},{fc}) -> ({tr},{tc})")
    return 0

def main():
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--rows', type=int, default=5)
    p1.add_argument('--cols', type=int, default=5)
    p1.add_argument('--goal', type=str, default='G')
    p1.add_argument('--seed', type=int, required=True)
    p1.add_argument('--target', type=int, default=None)
    p1.add_argument('--out', type=str, default=None)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('pack')
    p2.add_argument('--count', type=int, required=True)
    p2.add_argument('--rows', type=int, default=5)
    p2.add_argument('--cols', type=int, default=5)
    p2.add_argument('--goal', type=str, default='G')
    p2.add_argument('--seed', type=int, required=True)
    p2.add_argument('--target', type=int, default=None)
    p2.add_argument('--out', type=str, required=True)
    p2.set_defaults(func=cmd_pack)
    p3 = sub.add_parser('solve')
    p3.add_argument('path')
    p3.add_argument('--index', type=int, default=0)
    p3.add_argument('--max-states', type=int, default=DEFAULTS.solver_max_states)
    p3.set_defaults(func=cmd_solve)
    p4 = sub.add_parser('show')
    p4.add_argument('path')
    p4.add_argument('--index', type=int, default=None)
    p4.set_defaults(func=cmd_show)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    sys.exit(args.func(args) or 0)

if __name__ == '__main__':
    main()
