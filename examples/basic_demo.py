#!/usr/bin/env python3
"""
Basic example demonstrating textseal signing and encryption.

This example shows:
1. Key generation for all three algorithms
2. BLAKE3 keyed-hash sign/verify
3. Ed25519 sign/verify with a separate public key
4. ChaCha20-Poly1305 encrypt/decrypt
5. Tamper detection
"""

import sys
import os

# Add the textseal package to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from textseal.crypto import AuthenticationFailed
from textseal.crypto.keygen import generate_keys
from textseal.crypto.loader import (
    load_blake3_signer,
    load_chacha20_cipher,
    load_ed25519_signer,
    load_ed25519_verifier,
)
from textseal.utils.codec import encode_urlsafe


def main():
    print("🔏 textseal demo")
    print("=" * 60)
    message = b"Hello from textseal! This is a test message."

    # 1. Generate keys
    print("\n1. Generating keys...")
    (blake3_key,) = generate_keys("blake3")
    ed25519_sk, ed25519_pk = generate_keys("ed25519")
    (chacha20_key,) = generate_keys("chacha20")
    print(f"   blake3:   {len(blake3_key)} bytes")
    print(f"   ed25519:  {len(ed25519_sk)} + {len(ed25519_pk)} bytes")
    print(f"   chacha20: {len(chacha20_key)} bytes")

    # 2. BLAKE3
    print("\n2. BLAKE3 keyed hash...")
    signer = load_blake3_signer(blake3_key)
    signature = signer.sign(message)
    print(f"   Signature: {encode_urlsafe(signature)}")
    print(f"   ✅ Verified: {signer.verify(message, signature)}")

    # 3. Ed25519
    print("\n3. Ed25519 signature...")
    signature = load_ed25519_signer(ed25519_sk).sign(message)
    verifier = load_ed25519_verifier(ed25519_pk)
    print(f"   Signature: {encode_urlsafe(signature)[:32]}... ({len(signature)} bytes)")
    print(f"   ✅ Verified: {verifier.verify(message, signature)}")
    print(f"   Tampered message verifies: {verifier.verify(message + b'!', signature)}")

    # 4. ChaCha20-Poly1305
    print("\n4. ChaCha20-Poly1305 encryption...")
    cipher = load_chacha20_cipher(chacha20_key)
    ciphertext = cipher.encrypt(message)
    print(f"   Ciphertext: {ciphertext[:32]}...")
    print(f"   Decrypted: {cipher.decrypt(ciphertext).decode()}")

    # 5. Tamper detection
    print("\n5. Decrypting with the wrong key...")
    (other_key,) = generate_keys("chacha20")
    try:
        load_chacha20_cipher(other_key).decrypt(ciphertext)
        print("   ❌ Unexpectedly decrypted")
        return 1
    except AuthenticationFailed as e:
        print(f"   ✅ Rejected: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
