"""Pages written by the sync that have no source file in the protocol repo."""

from __future__ import annotations

from olocus_site.docs_sync.mappings import front_matter

QUICKSTART = front_matter(id="quickstart", title="Quick Start", sidebar_position=1) + """\
# Quick Start Guide

Get up and running with the Olocus Protocol in 5 minutes.

## Prerequisites

- Rust 1.75 or later
- Git

## Installation

```bash
# Clone the repository
git clone https://codeberg.org/olocus/protocol.git
cd protocol

# Build the project (pure Rust, no external dependencies!)
cargo build --release

# Run tests
cargo test

# Try the demo
cargo run --example protocol_demo
```

## Your First Block

```rust
use olocus_core::*;

fn main() {
    // Generate a key pair
    let key = generate_key();

    // Create a genesis block
    let genesis = Block::genesis(
        EmptyPayload,
        &key,
        current_timestamp()
    );

    println!("Created block: {:?}", genesis);
}
```

## Next Steps

- [Create your first chain](./first-chain)
- [Use location extension](./using-extensions)
- [Explore the API](../api/core)
"""

BLOCKS = front_matter(id="blocks", title="Blocks") + """\
# Understanding Blocks

Blocks are the fundamental unit of data in the Olocus Protocol.

## Block Structure

Every block contains:
- **Header**: Metadata including version, timestamp, and references
- **Payload**: Your application data (any type implementing `BlockPayload`)
- **Signature**: Ed25519 signature ensuring authenticity

## Block Types

### Genesis Block
The first block in a chain, with a zero previous hash.

### Regular Block
Links to a previous block, forming the chain.

## Code Example

```rust
pub struct Block<P: BlockPayload> {
    pub header: BlockHeader,
    pub payload: P,
    pub signature: [u8; 64],
}
```
"""

ARCHITECTURE_OVERVIEW = front_matter(id="overview", title="Architecture Overview") + """\
# System Architecture

The Olocus Protocol follows a modular, extensible architecture inspired by \
successful protocols like HTTP and SMTP.

## Core Principles

1. **Minimal Core**: ~500 lines of essential functionality
2. **Extension-Based**: All advanced features via extensions
3. **Type-Agnostic**: Generic over any payload type
4. **Future-Proof**: Enum/trait hybrid for extensibility

## Components

### Core Protocol
- Block creation and verification
- Cryptographic operations
- Hash chain validation
- Wire format encoding

### Extensions (23 modules)
- **Location**: GPS, clustering, spoofing detection
- **Trust**: Reputation, attestations, peer connections
- **ML**: On-device inference, federated learning
- **Privacy**: GDPR compliance, differential privacy
- And 19 more...

## Design Philosophy

Following the Unix philosophy:
- Do one thing well
- Compose simple parts
- Text (or binary) streams as universal interface
"""

# Relative to the docs directory
GENERATED_PAGES: dict[str, str] = {
    "getting-started/quickstart.md": QUICKSTART,
    "concepts/blocks.md": BLOCKS,
    "architecture/overview.md": ARCHITECTURE_OVERVIEW,
}
