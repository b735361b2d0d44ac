"""Pass-through node queries exposed by the REST façade."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from zcash_gateway.modules.common.exceptions import ValidationError
from zcash_gateway.modules.common.rpc import RpcChannel

logger = logging.getLogger(__name__)

MAX_CONFIRMATIONS = 9999999


@dataclass(slots=True)
class NodeService:
    rpc: RpcChannel

    # Blockchain

    async def get_blockchain_info(self) -> Any:
        return await self.rpc.call("getblockchaininfo")

    async def get_block_count(self) -> int:
        return await self.rpc.call("getblockcount")

    async def get_block_hash(self, height: int) -> str:
        return await self.rpc.call("getblockhash", [height])

    async def get_block(self, blockhash: str, verbosity: int = 1) -> Any:
        if not blockhash:
            raise ValidationError("Block hash is required")
        return await self.rpc.call("getblock", [blockhash, verbosity])

    # Wallet

    async def get_wallet_info(self) -> Any:
        return await self.rpc.call("getwalletinfo")

    async def get_balance(self, min_confirmations: int = 1) -> Any:
        return await self.rpc.call("getbalance", ["*", min_confirmations])

    async def get_address_for_account(self, account: Optional[int], diversifier_index: Optional[int] = None) -> dict:
        if account is None:
            raise ValidationError("Account number is required")
        params: list[Any] = [account]
        if diversifier_index is not None:
            params.append([diversifier_index])
        return await self.rpc.call("z_getaddressforaccount", params)

    async def create_account(self) -> dict[str, Any]:
        """Create a wallet account and derive its default unified address."""
        created = await self.rpc.call("z_getnewaccount")
        account = created["account"]
        address = await self.get_address_for_account(account)
        logger.info("New account %s created with address %s", account, address.get("address"))
        return {
            "account": account,
            "address": address.get("address"),
            "receiverTypes": address.get("receiver_types"),
        }

    async def list_unspent(self, min_confirmations: int = 1, max_confirmations: int = MAX_CONFIRMATIONS) -> Any:
        return await self.rpc.call("listunspent", [min_confirmations, max_confirmations])

    async def list_accounts(self) -> Any:
        return await self.rpc.call("z_listaccounts")

    async def list_addresses(self) -> Any:
        return await self.rpc.call("listaddresses")

    # Transactions

    async def get_transaction(self, txid: str) -> Any:
        if not txid:
            raise ValidationError("Transaction ID is required")
        return await self.rpc.call("gettransaction", [txid])

    async def list_transactions(self, count: int = 10, skip: int = 0) -> Any:
        return await self.rpc.call("listtransactions", ["*", count, skip])

    async def get_raw_transaction(self, txid: str, verbose: bool = False) -> Any:
        if not txid:
            raise ValidationError("Transaction ID is required")
        return await self.rpc.call("getrawtransaction", [txid, 1 if verbose else 0])

    async def send_to_address(self, address: Optional[str], amount: Optional[float], comment: str = "") -> str:
        if not address or not amount:
            raise ValidationError("Address and amount are required")
        txid = await self.rpc.call("sendtoaddress", [address, amount, comment])
        logger.info("Sent %s to %s: %s", amount, address, txid)
        return txid

    async def validate_address(self, address: str) -> Any:
        if not address:
            raise ValidationError("Address is required")
        return await self.rpc.call("validateaddress", [address])

    # Network, mining and fees

    async def get_network_info(self) -> Any:
        return await self.rpc.call("getnetworkinfo")

    async def get_connection_count(self) -> int:
        return await self.rpc.call("getconnectioncount")

    async def get_mining_info(self) -> Any:
        return await self.rpc.call("getmininginfo")

    async def estimate_fee(self, nblocks: int = 6) -> Any:
        return await self.rpc.call("estimatefee", [nblocks])
