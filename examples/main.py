"""
Parse, recover and verify an Ethereum personal_sign signature.

Settings are read from the environment (optionally a .env file):
LOG_LEVEL, ETH_SIGNATURE_LOG_FORMAT
"""
import dotenv
from eth_account import Account
from eth_account.messages import encode_defunct
from rich.console import Console
from rich.table import Table
from rich.traceback import install

from eth_signature import MessageHash, Signature, SignatureError
from eth_signature.config import SignatureConfig
from eth_signature.logging import configure_logging
from eth_signature.utils import hash_message

# Install rich traceback handler
install()

console = Console()

# web3.js documentation test key, never use it for real funds
PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
MESSAGE = "Some data"


def main():
    dotenv.load_dotenv()
    config = SignatureConfig.from_env()
    configure_logging(config)

    account = Account.from_key(PRIVATE_KEY)
    signed = Account.sign_message(encode_defunct(text=MESSAGE), private_key=PRIVATE_KEY)
    signature = Signature.from_bytes(bytes(signed.signature))

    table = Table(title="Signature")
    table.add_column("field")
    table.add_column("value")
    table.add_row("r", "0x" + signature.r.hex())
    table.add_row("s", "0x" + signature.s.hex())
    table.add_row("v", str(signature.v))
    table.add_row("hex", signature.to_hex())
    console.print(table)

    recovered = signature.recover(MESSAGE)
    from_hash = signature.recover(MessageHash(digest=hash_message(MESSAGE.encode())))
    console.print(f"Signer:             {account.address}")
    console.print(f"Recovered (data):   {recovered}")
    console.print(f"Recovered (hash):   {from_hash}")

    # Same signature, EIP-155 encoded for chain 1
    eip155 = signature.model_copy(update={"v": 1 * 2 + 35 + signature.recovery_id})
    console.print(f"EIP-155 v={eip155.v} recovers {eip155.recover(MESSAGE)}")
    console.print(f"Wire v byte: {eip155.to_bytes()[64]}, as Electrum: {eip155.to_bytes(electrum_v=True)[64]}")

    try:
        signature.verify("Other data", account.address)
    except SignatureError as e:
        console.print(f"[red]{e.kind.value}[/red]: {e}")


if __name__ == "__main__":
    main()
