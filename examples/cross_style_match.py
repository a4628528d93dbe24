#!/usr/bin/env python3
"""Set up the royal pieces of a chess vs. shogi match and play with them."""
from __future__ import annotations

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gan_core.enums import Side, State
from gan_core.factory import IdentifierFactory
from gan_core.identifier import CompositeIdentifier


def main() -> None:
    white = IdentifierFactory("chess", Side.FIRST)
    gote = white.opponent("shogi")

    king = white.piece("K")
    gyoku = gote.piece("K")
    print(f"First player king:  {king}")
    print(f"Second player king: {gyoku}")
    print(f"  same type: {king.same_type(gyoku)}, cross style: {king.cross_style(gyoku)}")

    # A shogi pawn is promoted, captured and dropped back by the other player
    pawn = gote.piece("P")
    tokin = pawn.enhance()
    captured = tokin.normalize().flip()
    print(f"\nPawn: {pawn} -> promoted {tokin} -> captured {captured}")

    print("\nParsing:")
    for text in ["CHESS:K", "shogi:+p", "CHESS:k", "CHESS::K", "xiangqi:-g"]:
        if CompositeIdentifier.is_valid(text):
            identifier = CompositeIdentifier.from_str(text)
            print(f"  {text:<12} {identifier.to_dict()}")
        else:
            print(f"  {text:<12} invalid")

    print(f"\nEnhanced rook: {CompositeIdentifier.from_params('ogi', 'R', Side.SECOND, State.ENHANCED)}")


if __name__ == "__main__":
    main()
