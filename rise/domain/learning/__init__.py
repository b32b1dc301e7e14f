"""Learning module: lesson progress and exam attempts."""
