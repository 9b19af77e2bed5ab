import json
import sys

import matplotlib.pyplot as plt
import numpy as np

# --- CONFIGURATION ---
DATA_FILE = sys.argv[1] if len(sys.argv) > 1 else 'equity_result.json'

# 1. LOAD THE DATA
try:
    with open(DATA_FILE, 'r') as f:
        result = json.load(f)
    print(f"Loaded {len(result['players'])} hands, {result['total']} combinations from {DATA_FILE}.")
except FileNotFoundError:
    print(f"Error: Could not find '{DATA_FILE}'. Run scripts/equity_calc.py with --out first.")
    sys.exit(1)

players = result['players']
labels = [p['hand'] for p in players]


# --- GRAPH 1: WIN / TIE PER HAND (STACKED BAR) ---
def plot_win_tie():
    wins = np.array([p['win_pct'] or 0.0 for p in players])
    ties = np.array([p['tie_pct'] or 0.0 for p in players])
    x = np.arange(len(players))

    plt.figure(figsize=(10, 6))
    plt.bar(x, wins, color='#2ca02c', edgecolor='black', label='Win')
    plt.bar(x, ties, bottom=wins, color='#ff7f0e', edgecolor='black', label='Tie')

    plt.xticks(x, labels)
    plt.ylim(0, 100)
    board = result['board'] or 'preflop'
    plt.title(f'Equity by Hand ({board})', fontsize=14, fontweight='bold')
    plt.ylabel('% of combinations', fontsize=12)
    plt.legend()
    plt.grid(True, axis='y', alpha=0.3)
    plt.tight_layout()
    plt.savefig('graph_equity_win_tie.png', dpi=300)
    print("Saved 'graph_equity_win_tie.png'")
    plt.show()


# --- GRAPH 2: MADE-HAND DISTRIBUTION WHEN WINNING OR TYING ---
def plot_category_distribution():
    categories = list(players[0]['category_pct'].keys())
    # undefined (never won or tied) -> NaN, drawn as a missing bar
    table = np.array(
        [[np.nan if p['category_pct'][c] is None else p['category_pct'][c] for c in categories] for p in players]
    )

    x = np.arange(len(categories))
    width = 0.8 / max(len(players), 1)

    plt.figure(figsize=(12, 6))
    for i, label in enumerate(labels):
        plt.bar(x + i * width, table[i], width=width, edgecolor='black', label=label)

    plt.xticks(x + width * (len(players) - 1) / 2, [c.replace('_', ' ') for c in categories], rotation=30)
    plt.title('Made Hand When Winning or Tying', fontsize=14, fontweight='bold')
    plt.ylabel('% of wins + ties', fontsize=12)
    plt.legend()
    plt.grid(True, axis='y', alpha=0.3)
    plt.tight_layout()
    plt.savefig('graph_equity_categories.png', dpi=300)
    print("Saved 'graph_equity_categories.png'")
    plt.show()


if __name__ == '__main__':
    plot_win_tie()
    plot_category_distribution()
