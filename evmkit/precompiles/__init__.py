"""Standard Ethereum precompiled contracts and their per-fork registry."""