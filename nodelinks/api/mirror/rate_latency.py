"""Human rating for a measured latency."""


def rate_latency(elapsed_ms: int) -> str:
    if elapsed_ms < 100:
        return "very fast"
    if elapsed_ms < 300:
        return "fast"
    if elapsed_ms < 800:
        return "good"
    if elapsed_ms < 1500:
        return "fair"
    return "slow"
