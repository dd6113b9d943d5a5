class Galaxy:
    """
    The base class for a galaxy. Keeps track of the sectors and systems, both
    keyed by seed.
    """

    def __init__(self, seed, config) -> None:
        self.seed = seed
        self.config = config
        self.sectors = {}
        self.systems = {}

    def __repr__(self):
        str = f"{self.config.galaxy_type.value} galaxy 0x{self.seed:016x}\n"
        str += f"{len(self.sectors)} sectors, {len(self.systems)} systems loaded"
        return str

    def stars(self):
        return [star for system in self.systems.values() for star in system.stars.values()]

    def planets(self):
        return [planet for system in self.systems.values() for planet in system.planets()]

    def to_dict(self, full=False):
        """
        Document holding everything generated so far, with top-level
        "galaxy", "sectors" and "systems" keys
        """
        return {
            "galaxy": {"seed": self.seed, "config": self.config.to_dict()},
            "sectors": [sector.dump_params() for sector in self.sectors.values()],
            "systems": [
                system.dump_params(full=full) for system in self.systems.values()
            ],
        }
