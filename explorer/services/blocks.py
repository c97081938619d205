"""Latest-block lookup."""

from explorer.services._helpers import from_millis, parse_count
from explorer.services.decoding import decode_one, parse_remote
from explorer.services.node_client import API_PREFIX, NodeExec
from explorer.services.result import Result
from explorer.services.schemas import Block, BlockRemote


def decode_block(raw: object) -> Block:
    r: BlockRemote = parse_remote(BlockRemote, raw)
    return Block(
        number=parse_count("number", r.number),
        hash=r.hash,
        timestamp=from_millis("timestamp", r.timestamp),
        coinbase=r.coinbase,
    )


async def fetch_latest_block(client: NodeExec) -> Result[Block]:
    return decode_one(await client.exec("GET", f"{API_PREFIX}/latest-block"), decode_block)
