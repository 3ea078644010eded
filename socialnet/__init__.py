"""Record parsing and follower derivation for the social network page builder."""
