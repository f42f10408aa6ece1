"""EFIN METAR board: weather reports relevant to traffic in Finnish airspace."""
