"""World Canon — versioned YAML document store for the world knowledge base."""
