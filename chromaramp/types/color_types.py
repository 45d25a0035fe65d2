from typing import Tuple

Triple = Tuple[float, float, float]
RGB255 = Tuple[int, int, int]
