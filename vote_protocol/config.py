# Taille (en bits) du premier sûr généré par défaut pour une élection
PRIME_BITS = 2048

# Nombre de collecteurs indépendants participant à une élection
NUM_COLLECTORS = 2

# Taille minimale acceptée pour un premier généré (en bits)
MIN_PRIME_BITS = 8
