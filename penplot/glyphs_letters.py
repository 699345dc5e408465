"""Simplex stroke-font data for the upper and lower case letters.

Each entry maps a character code to (advance width, vertices). A vertex
of (-1, -1) lifts the pen and ends the current stroke.
"""

LETTERS: dict[int, tuple[int, tuple[tuple[int, int], ...]]] = {
    65: (18, ((9, 21), (1, 0), (-1, -1), (9, 21), (17, 0), (-1, -1), (4, 7),
              (14, 7))),
    66: (21, ((4, 21), (4, 0), (-1, -1), (4, 21), (13, 21), (16, 20), (17, 19),
              (18, 17), (18, 15), (17, 13), (16, 12), (13, 11), (-1, -1),
              (4, 11), (13, 11), (16, 10), (17, 9), (18, 7), (18, 4), (17, 2),
              (16, 1), (13, 0), (4, 0))),
    67: (21, ((18, 16), (17, 18), (15, 20), (13, 21), (9, 21), (7, 20),
              (5, 18), (4, 16), (3, 13), (3, 8), (4, 5), (5, 3), (7, 1), (9, 0),
              (13, 0), (15, 1), (17, 3), (18, 5))),
    68: (21, ((4, 21), (4, 0), (-1, -1), (4, 21), (11, 21), (14, 20), (16, 18),
              (17, 16), (18, 13), (18, 8), (17, 5), (16, 3), (14, 1), (11, 0),
              (4, 0))),
    69: (19, ((4, 21), (4, 0), (-1, -1), (4, 21), (17, 21), (-1, -1), (4, 11),
              (12, 11), (-1, -1), (4, 0), (17, 0))),
    70: (18, ((4, 21), (4, 0), (-1, -1), (4, 21), (17, 21), (-1, -1), (4, 11),
              (12, 11))),
    71: (21, ((18, 16), (17, 18), (15, 20), (13, 21), (9, 21), (7, 20),
              (5, 18), (4, 16), (3, 13), (3, 8), (4, 5), (5, 3), (7, 1), (9, 0),
              (13, 0), (15, 1), (17, 3), (18, 5), (18, 8), (-1, -1), (13, 8),
              (18, 8))),
    72: (22, ((4, 21), (4, 0), (-1, -1), (18, 21), (18, 0), (-1, -1), (4, 11),
              (18, 11))),
    73: (8, ((4, 21), (4, 0))),
    74: (16, ((12, 21), (12, 5), (11, 2), (10, 1), (8, 0), (6, 0), (4, 1),
              (3, 2), (2, 5), (2, 7))),
    75: (21, ((4, 21), (4, 0), (-1, -1), (18, 21), (4, 7), (-1, -1), (9, 12),
              (18, 0))),
    76: (17, ((4, 21), (4, 0), (-1, -1), (4, 0), (16, 0))),
    77: (24, ((4, 21), (4, 0), (-1, -1), (4, 21), (12, 0), (-1, -1), (20, 21),
              (12, 0), (-1, -1), (20, 21), (20, 0))),
    78: (22, ((4, 21), (4, 0), (-1, -1), (4, 21), (18, 0), (-1, -1), (18, 21),
              (18, 0))),
    79: (22, ((9, 21), (7, 20), (5, 18), (4, 16), (3, 13), (3, 8), (4, 5),
              (5, 3), (7, 1), (9, 0), (13, 0), (15, 1), (17, 3), (18, 5),
              (19, 8), (19, 13), (18, 16), (17, 18), (15, 20), (13, 21),
              (9, 21))),
    80: (21, ((4, 21), (4, 0), (-1, -1), (4, 21), (13, 21), (16, 20), (17, 19),
              (18, 17), (18, 14), (17, 12), (16, 11), (13, 10), (4, 10))),
    81: (22, ((9, 21), (7, 20), (5, 18), (4, 16), (3, 13), (3, 8), (4, 5),
              (5, 3), (7, 1), (9, 0), (13, 0), (15, 1), (17, 3), (18, 5),
              (19, 8), (19, 13), (18, 16), (17, 18), (15, 20), (13, 21),
              (9, 21), (-1, -1), (12, 4), (18, -2))),
    82: (21, ((4, 21), (4, 0), (-1, -1), (4, 21), (13, 21), (16, 20), (17, 19),
              (18, 17), (18, 15), (17, 13), (16, 12), (13, 11), (4, 11),
              (-1, -1), (11, 11), (18, 0))),
    83: (20, ((17, 18), (15, 20), (12, 21), (8, 21), (5, 20), (3, 18), (3, 16),
              (4, 14), (5, 13), (7, 12), (13, 10), (15, 9), (16, 8), (17, 6),
              (17, 3), (15, 1), (12, 0), (8, 0), (5, 1), (3, 3))),
    84: (16, ((8, 21), (8, 0), (-1, -1), (1, 21), (15, 21))),
    85: (22, ((4, 21), (4, 6), (5, 3), (7, 1), (10, 0), (12, 0), (15, 1),
              (17, 3), (18, 6), (18, 21))),
    86: (18, ((1, 21), (9, 0), (-1, -1), (17, 21), (9, 0))),
    87: (24, ((2, 21), (7, 0), (-1, -1), (12, 21), (7, 0), (-1, -1), (12, 21),
              (17, 0), (-1, -1), (22, 21), (17, 0))),
    88: (20, ((3, 21), (17, 0), (-1, -1), (17, 21), (3, 0))),
    89: (18, ((1, 21), (9, 11), (9, 0), (-1, -1), (17, 21), (9, 11))),
    90: (20, ((17, 21), (3, 0), (-1, -1), (3, 21), (17, 21), (-1, -1), (3, 0),
              (17, 0))),
    97: (19, ((15, 14), (15, 0), (-1, -1), (15, 11), (13, 13), (11, 14),
              (8, 14), (6, 13), (4, 11), (3, 8), (3, 6), (4, 3), (6, 1), (8, 0),
              (11, 0), (13, 1), (15, 3))),
    98: (19, ((4, 21), (4, 0), (-1, -1), (4, 11), (6, 13), (8, 14), (11, 14),
              (13, 13), (15, 11), (16, 8), (16, 6), (15, 3), (13, 1), (11, 0),
              (8, 0), (6, 1), (4, 3))),
    99: (18, ((15, 11), (13, 13), (11, 14), (8, 14), (6, 13), (4, 11), (3, 8),
              (3, 6), (4, 3), (6, 1), (8, 0), (11, 0), (13, 1), (15, 3))),
    100: (19, ((15, 21), (15, 0), (-1, -1), (15, 11), (13, 13), (11, 14),
               (8, 14), (6, 13), (4, 11), (3, 8), (3, 6), (4, 3), (6, 1),
               (8, 0), (11, 0), (13, 1), (15, 3))),
    101: (18, ((3, 8), (15, 8), (15, 10), (14, 12), (13, 13), (11, 14),
               (8, 14), (6, 13), (4, 11), (3, 8), (3, 6), (4, 3), (6, 1),
               (8, 0), (11, 0), (13, 1), (15, 3))),
    102: (12, ((10, 21), (8, 21), (6, 20), (5, 17), (5, 0), (-1, -1), (2, 14),
               (9, 14))),
    103: (19, ((15, 14), (15, -2), (14, -5), (13, -6), (11, -7), (8, -7),
               (6, -6), (-1, -1), (15, 11), (13, 13), (11, 14), (8, 14),
               (6, 13), (4, 11), (3, 8), (3, 6), (4, 3), (6, 1), (8, 0),
               (11, 0), (13, 1), (15, 3))),
    104: (19, ((4, 21), (4, 0), (-1, -1), (4, 10), (7, 13), (9, 14), (12, 14),
               (14, 13), (15, 10), (15, 0))),
    105: (8, ((3, 21), (4, 20), (5, 21), (4, 22), (3, 21), (-1, -1), (4, 14),
              (4, 0))),
    106: (10, ((5, 21), (6, 20), (7, 21), (6, 22), (5, 21), (-1, -1), (6, 14),
               (6, -3), (5, -6), (3, -7), (1, -7))),
    107: (17, ((4, 21), (4, 0), (-1, -1), (14, 14), (4, 4), (-1, -1), (8, 8),
               (15, 0))),
    108: (8, ((4, 21), (4, 0))),
    109: (30, ((4, 14), (4, 0), (-1, -1), (4, 10), (7, 13), (9, 14), (12, 14),
               (14, 13), (15, 10), (15, 0), (-1, -1), (15, 10), (18, 13),
               (20, 14), (23, 14), (25, 13), (26, 10), (26, 0))),
    110: (19, ((4, 14), (4, 0), (-1, -1), (4, 10), (7, 13), (9, 14), (12, 14),
               (14, 13), (15, 10), (15, 0))),
    111: (19, ((8, 14), (6, 13), (4, 11), (3, 8), (3, 6), (4, 3), (6, 1),
               (8, 0), (11, 0), (13, 1), (15, 3), (16, 6), (16, 8), (15, 11),
               (13, 13), (11, 14), (8, 14))),
    112: (19, ((4, 14), (4, -7), (-1, -1), (4, 11), (6, 13), (8, 14), (11, 14),
               (13, 13), (15, 11), (16, 8), (16, 6), (15, 3), (13, 1), (11, 0),
               (8, 0), (6, 1), (4, 3))),
    113: (19, ((15, 14), (15, -7), (-1, -1), (15, 11), (13, 13), (11, 14),
               (8, 14), (6, 13), (4, 11), (3, 8), (3, 6), (4, 3), (6, 1),
               (8, 0), (11, 0), (13, 1), (15, 3))),
    114: (13, ((4, 14), (4, 0), (-1, -1), (4, 8), (5, 11), (7, 13), (9, 14),
               (12, 14))),
    115: (17, ((14, 11), (13, 13), (10, 14), (7, 14), (4, 13), (3, 11), (4, 9),
               (6, 8), (11, 7), (13, 6), (14, 4), (14, 3), (13, 1), (10, 0),
               (7, 0), (4, 1), (3, 3))),
    116: (12, ((5, 21), (5, 4), (6, 1), (8, 0), (10, 0), (-1, -1), (2, 14),
               (9, 14))),
    117: (19, ((4, 14), (4, 4), (5, 1), (7, 0), (10, 0), (12, 1), (15, 4),
               (-1, -1), (15, 14), (15, 0))),
    118: (16, ((2, 14), (8, 0), (-1, -1), (14, 14), (8, 0))),
    119: (22, ((3, 14), (7, 0), (-1, -1), (11, 14), (7, 0), (-1, -1), (11, 14),
               (15, 0), (-1, -1), (19, 14), (15, 0))),
    120: (17, ((3, 14), (14, 0), (-1, -1), (14, 14), (3, 0))),
    121: (16, ((2, 14), (8, 0), (-1, -1), (14, 14), (8, 0), (6, -4), (4, -6),
               (2, -7), (1, -7))),
    122: (17, ((14, 14), (3, 0), (-1, -1), (3, 14), (14, 14), (-1, -1), (3, 0),
               (14, 0))),
}