"""
Limitador de intentos en memoria, por (identificador, ruta) con ventana deslizante.

Uso:
- Login por IP: allow((ip, "/login"), limit=settings.login_rate_per_min, window_seconds=60)

Las claves sin intentos dentro de la ventana se eliminan, así el bucket sólo
guarda clientes activos.
"""
from time import time
from typing import Dict, List, Tuple

Key = Tuple[str, str]

BUCKET: Dict[Key, List[float]] = {}


def _sweep(now: float, window_seconds: int) -> None:
    for key in [k for k, hits in BUCKET.items() if not hits or now - hits[-1] >= window_seconds]:
        del BUCKET[key]


def allow(key: Key, limit: int = 5, window_seconds: int = 60) -> bool:
    """True si `key` aún tiene intentos en la ventana; registra el intento."""
    now = time()
    _sweep(now, window_seconds)
    hits = [t for t in BUCKET.get(key, []) if now - t < window_seconds]
    if len(hits) >= limit:
        BUCKET[key] = hits
        return False
    hits.append(now)
    BUCKET[key] = hits
    return True


def reset() -> None:
    BUCKET.clear()
