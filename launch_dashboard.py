"""Launch the artwork explorer against the Art Institute of Chicago API.

Pass --offline to browse a generated 500-row collection instead.
"""

import sys

import numpy as np
import pandas as pd
import artwork_explorer as ae

if "--offline" in sys.argv:
    rng = np.random.default_rng(42)
    n = 500
    start = rng.integers(1400, 2000, n)
    frame = pd.DataFrame({
        "id": np.arange(10_001, 10_001 + n),
        "title": [f"Study No. {i + 1}" for i in range(n)],
        "place_of_origin": rng.choice(["France", "Japan", "United States", None], n),
        "artist_display": rng.choice(["Claude Monet", "Hokusai", "Edward Hopper", None], n),
        "inscriptions": None,
        "date_start": start,
        "date_end": start + rng.integers(0, 5, n),
    })
    fetcher = ae.InMemoryPageFetcher(frame, delay=0.3)
    print(f"Offline collection: {len(frame)} artworks")
else:
    fetcher = None

print("Launching artwork explorer...")
ae.explore(fetcher=fetcher)
