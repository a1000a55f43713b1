"""Small text helpers shared by the CLI and storage layers."""
