class Sector:
    """
    A cubic region of the galaxy grid.

    The sector only holds the seeds of its member systems, the systems
    themselves are owned by the galaxy.
    """

    def __init__(self, seed, position, name=""):
        self.seed = seed
        # Integer grid coordinates (x, y, z)
        self.position = tuple(int(p) for p in position)
        self.name = name
        self.system_seeds = []

    def __repr__(self):
        return (
            f"{type(self).__name__} object\n{self.name}\t"
            f"position:{self.position}\tsystems:{len(self.system_seeds)}"
        )

    def dump_params(self):
        return {
            "seed": self.seed,
            "position": list(self.position),
            "name": self.name,
            "systems": list(self.system_seeds),
        }
