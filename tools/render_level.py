#!/usr/bin/env python3
# Render level JSON (single level or pack) to PNGs using Pillow.

import argparse, os
from PIL import Image, ImageDraw, ImageFont
from floodpaint.levels import load_level_pack

COLORS = {
    "G": (152, 251, 152, 255),
    "B": (173, 216, 230, 255),
    "R": (255, 105, 97, 255),
    "Y": (255, 255, 204, 255),
    "P": (221, 160, 221, 255),
}
EMPTY_RGBA = (211, 211, 211, 255)
WALL_RGBA = (64, 64, 64, 255)
DOT_RGBA = (81, 81, 77, 255)

def _fallback_color(symbol):
    # Unknown palette symbol: stable gray-ish tint from its code point
    v = 120 + (ord(symbol[0]) * 37) % 100
    return (v, v, 200, 255)

def draw_dots(draw, x0, y0, tile_size, n):
    if n <= 0:
        return
    r = max(2, tile_size // 12)
    step = tile_size // (n + 1)
    cy = y0 + tile_size // 2
    for i in range(n):
        cx = x0 + step * (i + 1)
        draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=DOT_RGBA)

def render_board(board, out_png, tile_size=48, margin=4):
    w = board.cols * tile_size + 2*margin
    h = board.rows * tile_size + 2*margin + tile_size // 2
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    for r in range(board.rows):
        for c in range(board.cols):
            cell = board.get(r, c)
            x0 = margin + c * tile_size
            y0 = margin + r * tile_size
            if cell.is_empty:
                fill = EMPTY_RGBA
            elif cell.is_wall:
                fill = WALL_RGBA
            else:
                fill = COLORS.get(cell.color) or _fallback_color(cell.color)
            draw.rectangle((x0, y0, x0 + tile_size - 2, y0 + tile_size - 2), fill=fill)
            if cell.is_paintable:
                draw_dots(draw, x0, y0, tile_size, cell.dots)
    # Goal swatch under the board
    gy = margin + board.rows * tile_size + 2
    goal_fill = COLORS.get(board.goal_color) or _fallback_color(board.goal_color)
    draw.rectangle((margin, gy, w - margin, h - 2), fill=goal_fill)
    draw.text((margin + 4, gy + 2), f"goal {board.goal_color}", fill=(0, 0, 0, 255),
              font=ImageFont.load_default())
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("path", help="Level JSON file (single level or list)")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=48, help="Tile size in pixels")
    args = ap.parse_args()

    levels = load_level_pack(args.path)
    stem = os.path.splitext(os.path.basename(args.path))[0]
    for i, board in enumerate(levels):
        render_board(board, os.path.join(args.outdir, f"{stem}_{i:02d}.png"), tile_size=args.tile)
    print(f"Wrote {len(levels)} PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
