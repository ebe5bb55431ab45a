"""FastAPI endpoint for the packing engine."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from binpack.config import configure_logging, get_settings
from binpack.io.schemas import PackRequest, PackResponse
from binpack.packing.first_fit import pack, unplaced_items

logger = logging.getLogger(__name__)

configure_logging()

app = FastAPI(
    title="Binpack API",
    description="3D first-fit container packing service",
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {
        "status": "ok",
        "overlap_rule": get_settings().overlap_rule.value,
    }


@app.post("/pack", response_model=PackResponse)
def pack_endpoint(request: PackRequest) -> PackResponse:
    """
    Pack the requested items into the requested containers.

    Input (request body):
        {
            "containers": [{"preset": "40HC"}, {"width": 100, "height": 50, "depth": 50, "max_weight": 500}],
            "items": [{"width": 10, "height": 20, "depth": 30, "weight": 5, "payload": "A", "quantity": 4}],
            "overlap_rule": "symmetric",
            "chronological": false
        }

    Returns one entry per container, largest first, plus the items nothing accepted.
    """
    try:
        job = request.to_job()
        results = pack(job, overlap_rule=request.overlap_rule)
        response = PackResponse.from_results(results, unplaced_items(results), chronological=request.chronological)

        logger.info(
            f"containers={len(response.containers)}, "
            f"placed_items={sum(len(c.placed_items) for c in response.containers)}, "
            f"unplaced_items={len(response.unplaced)}"
        )
        return response

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
