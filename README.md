# evmkit

Building blocks for an Ethereum virtual machine, in pure Python:

- fixed-size hashes and addresses (`evmkit.bits.B256`, `evmkit.bits.B160`) with
  hex encoding and decoding (`encode_hex`, `decode_hex`, `FromHexError`);
- `keccak256`, `create_address`, `create2_address` and the hex helpers
  `encode_hex_bytes` / `decode_hex_bytes` in `evmkit.utilities`;
- hard-fork identifiers (`evmkit.specification.SpecId`) and per-fork `Spec`
  classes such as `BerlinSpec` and `LondonSpec`;
- bytecode containers (`evmkit.bytecode.Bytecode`) and jump-destination
  analysis data (`evmkit.jump_table.AnalysisData`, `ValidJumpAddress`);
- account state (`evmkit.state.AccountInfo`, `Account`, `StorageSlot`);
- event logs (`evmkit.log.Log`);
- the execution environment (`evmkit.env.Env`, `CfgEnv`, `BlockEnv`, `TxEnv`,
  `TransactTo`, `CreateScheme`);
- execution outcomes (`evmkit.result.Success`, `Revert`, `Halted`,
  `ResultAndState`) and errors (`TransactionError`, `PrevrandaoNotSet`,
  `DatabaseError`);
- database interfaces (`evmkit.db.Database`, `DatabaseRef`, `DatabaseCommit`,
  `RefDBWrapper`) and a database assembled from parts (`DatabaseComponents`);
- the standard precompiled contracts: ecrecover, SHA-256, RIPEMD-160, identity,
  alt_bn128 addition, multiplication and pairing check, and the BLAKE2 `F`
  compression function.

## Installation

```
pip install evmkit
```

The only runtime dependency is `pycryptodome`, used for Keccak-256 and
RIPEMD-160.

## Usage

### Addresses and hashes

```python
from evmkit.bits import B160
from evmkit.utilities import keccak256, create_address

sender = B160.from_int(0x1234)
print(sender.to_hex())

digest = keccak256(b"")
print(digest.to_hex())

new_contract = create_address(sender, 0)
```

`B160` and `B256` are `bytes` subclasses of fixed length; building one from
the wrong number of bytes raises `ValueError`. `from_hex` accepts the digits
with or without a `0x` prefix.

### Hard forks

```python
from evmkit.specification import SpecId

spec = SpecId.from_name("Berlin")
assert spec.enabled(SpecId.ISTANBUL)
```

Unknown names give `SpecId.LATEST`; `SpecId.try_from_u8` returns `None` for a
number that names no fork.

### Environment

```python
from evmkit.env import Env

env = Env()
env.tx.gas_price = 100
env.tx.gas_priority_fee = 2
env.block.basefee = 50
assert env.effective_gas_price() == 52
```

### Databases

`Database` and `DatabaseRef` are abstract classes with `basic`,
`code_by_hash`, `storage` and `block_hash`; failures are raised as
exceptions. `DatabaseComponents(state, block_hash)` combines a `StateSource`
and a `BlockHashSource`, and wraps anything they raise in a
`DatabaseComponentError` whose `kind` says which part failed.

### Precompiles

A precompile takes the call input and a gas limit and returns a tuple of the
gas used and the output bytes. Running out of gas or giving malformed input
raises `PrecompileError`, whose `kind` is a `PrecompileErrorKind`.

```python
from evmkit.bits import B160
from evmkit.precompile import PrecompileError, PrecompileErrorKind
from evmkit.precompiles.registry import Precompiles

precompiles = Precompiles.berlin()
sha256 = precompiles.get(B160.from_int(2))

gas_used, output = sha256(b"hello", 1_000)

try:
    sha256(b"hello", 10)
except PrecompileError as err:
    assert err.kind is PrecompileErrorKind.OUT_OF_GAS
```

The sets for each fork are `Precompiles.homestead()`,
`Precompiles.byzantium()`, `Precompiles.istanbul()`, `Precompiles.berlin()`
and `Precompiles.latest()`; `Precompiles.for_spec(...)` picks one by
`PrecompileSpec`. Each set is built once and shared.

The functions can also be called directly:
`evmkit.precompiles.secp256k1.ec_recover_run`,
`evmkit.precompiles.hashes.sha256_run` and `ripemd160_run`,
`evmkit.precompiles.identity.identity_run`,
`evmkit.precompiles.bn128.add_istanbul`, `add_byzantium`, `mul_istanbul`,
`mul_byzantium`, `pair_istanbul`, `pair_byzantium`, and
`evmkit.precompiles.blake2.run`. ecrecover returns empty output when the
signature is malformed or no key can be recovered. It does not raise in that
case.

## What this package does not do

- It has no interpreter: it does not execute bytecode or transactions. It
  only provides the types an interpreter works with.
- It has no modular exponentiation precompile at address 5. The Berlin and
  latest sets therefore hold the same precompiles as the Istanbul set.
- It provides no concrete database or storage backend, only the interfaces.
- The alt_bn128 pairing check is written in pure Python and is slow.

## Running the tests

```
pip install -e ".[test]"
pytest
```