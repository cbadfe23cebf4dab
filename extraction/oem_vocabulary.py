"""
Curated manufacturer vocabulary for OEM classification.

Display names as they should appear on lots. Lookups go through
`normalize_oem_value`, so spacing, punctuation and case in these entries only
affect presentation.
"""

from __future__ import annotations

import re
from typing import Dict, Tuple

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def normalize_oem_value(raw: str) -> str:
    """Lowercase and drop everything but ASCII letters and digits."""
    return _NON_ALNUM_RE.sub("", raw.lower())


CANONICAL_MANUFACTURERS: Tuple[str, ...] = (
    "3Com",
    "3Dlabs",
    "3M",
    "3rd Party",
    "3ware",
    "Aaeon",
    "Abbot",
    "Abit",
    "Ablecom",
    "Accelgraphics",
    "Accutone",
    "Acer",
    "Acme Packet",
    "ACP",
    "Actel",
    "Adaptec",
    "ADC",
    "Addonics",
    "Adesso",
    "ADIC",
    "Adobe",
    "ADT",
    "Adtech",
    "Adtran",
    "Adva Optical",
    "Advansys",
    "Advantech",
    "Advent",
    "AFC",
    "Agilent",
    "Airpax",
    "Alcatel",
    "Alera",
    "Alienware",
    "Allied",
    "Alps",
    "ALT",
    "Altec",
    "Alteon",
    "Altera",
    "Altos",
    "AMD",
    "Ametek Inc",
    "Amino Communications",
    "AMP",
    "Ampex",
    "Analogic",
    "Andrew",
    "Antex",
    "Anycom",
    "AOC",
    "APC",
    "Apex",
    "Apollo",
    "A-Power",
    "Apple",
    "Apricorn",
    "Aprotek",
    "APS",
    "Archive",
    "Argus Technologies",
    "Arista Networks",
    "Armada",
    "Arnet",
    "Arris",
    "Arrow",
    "Artec",
    "Aruba Networks",
    "Asante",
    "Ascend",
    "Askey",
    "Aspire",
    "Astec",
    "Asus",
    "AT&T",
    "Atalla",
    "ATG",
    "ATI",
    "Atmel",
    "AU Optronics",
    "Ault",
    "Avago",
    "Avantek",
    "Avaya",
    "Avocent",
    "AVX",
    "Axis",
    "Aztech",
    "Base",
    "Bason",
    "Battery Biz",
    "Bay Networks",
    "Baytech",
    "Belkin",
    "BenQ",
    "Best Data",
    "Best Power",
    "Biostar",
    "Black Box",
    "BlackBerry",
    "Bline",
    "Blonder Tongue Laboratory",
    "Broadcom",
    "Brocade",
    "Brooktrout",
    "Brother",
    "Buffalo",
    "Bull",
    "Bus Logic",
    "Bussman",
    "C.Itoh America",
    "Cable Exchange",
    "Cables To Go",
    "Cables Unlimited",
    "Cabletron",
    "Calix",
    "Canon",
    "Carling",
    "Carrier Access",
    "Cascade",
    "Case Logic",
    "Casio",
    "Catalyst",
    "CDTECH",
    "Celestica",
    "Central",
    "Checkmate",
    "Check Point",
    "Cherokee",
    "Chip PC",
    "Ciena",
    "Cirrus Logic",
    "Cisco",
    "Citizen",
    "Citrix",
    "Clearpoint",
    "Cobalt",
    "Codex",
    "Comdial",
    "Commando",
    "Compaq",
    "Compellent",
    "Compufox",
    "Computer Associates",
    "Conner",
    "Converge",
    "Cooltron",
    "Corel",
    "Corsair",
    "Cray",
    "Creative Labs",
    "Crucial",
    "C-Tec",
    "Cyber",
    "Cyberoam",
    "Cypress",
    "Dale",
    "Dallas",
    "Data Express",
    "Data General",
    "Datacard Group",
    "Datalogic",
    "Datamax",
    "Dataproducts",
    "Dataram",
    "Datasouth",
    "Datel",
    "Datsouth",
    "DEC",
    "Decision Data",
    "Dell",
    "Delta Electron",
    "Desco",
    "Dialogic",
    "Diebold",
    "Digi",
    "Digital Link",
    "Digitel",
    "D-Link",
    "DSI",
    "Dymo",
    "Eastern Research",
    "Edge",
    "Elma",
    "Elo",
    "Elpida",
    "eMachines",
    "EMC",
    "Emerson",
    "Emulex",
    "EnGenius",
    "Enterasys",
    "Envision",
    "Epson",
    "Equinox",
    "Ericsson",
    "Exabyte",
    "Extreme Networks",
    "Extron Electronics",
    "F5",
    "FAI",
    "Fairchild",
    "Fargo Electronics",
    "Fellowes",
    "Fijitsu",
    "Finisar",
    "Fluke",
    "Fore System",
    "Fortinet",
    "Foundry",
    "Foxconn",
    "FSC",
    "Fuji",
    "Fujitsu",
    "Funai",
    "Gateway",
    "General",
    "General Dynamics",
    "General Semiconductor",
    "Generic",
    "Genicom",
    "Gigabyte",
    "Gigamon",
    "GN Netcom",
    "GoldenRAM",
    "Goldstar",
    "Grandstream Networks",
    "Greenlee Textron",
    "GW Instek",
    "H3C",
    "Haliplex",
    "Hanna Instruments",
    "Harmonic",
    "Harris",
    "Heinemann",
    "HHP",
    "HighPoint",
    "Hitachi",
    "Honeywell",
    "Horizon",
    "HP",
    "HP ProCurve",
    "HPE",
    "HTC",
    "Huawei",
    "Hubbell",
    "Hynix",
    "Hyper Microsystems",
    "Hypercom",
    "Hypertec",
    "Hytek",
    "Hyundi",
    "IBM",
    "ICC",
    "IDT",
    "Imation",
    "Infineon",
    "Infinera",
    "InFocus",
    "Ingenico",
    "Intel",
    "Intelligent",
    "Interconnect",
    "Intermec",
    "Inter-Tech",
    "Inter-Tel",
    "IOGEAR",
    "Iomega",
    "iTouch",
    "Iwatsu",
    "Jabra",
    "Jet Stream",
    "Juniper",
    "Juniper Networks",
    "Kaspersky Lab",
    "Kemet",
    "Kentrox",
    "Kerio",
    "Kingston",
    "KOA",
    "Kodak",
    "Konica",
    "Krone",
    "Kyocera",
    "Labtec",
    "Lantronix",
    "Larscom",
    "Lenovo",
    "Lexmark",
    "LG",
    "Liebert",
    "LifeSize",
    "Lightwave",
    "Linksys",
    "Linux",
    "Lite-On",
    "Littelfuse",
    "Logitech",
    "Lorain",
    "LSI Logic",
    "Lucent",
    "Lynksys",
    "Magnetek",
    "MagTek",
    "Mannesmann Tally",
    "Marconi",
    "Matsushita",
    "Max",
    "Maxim",
    "Maxtor",
    "McDATA",
    "Mellanox",
    "Memorex Telex",
    "Meraki",
    "Metrologic",
    "Micron",
    "Micropolis",
    "Micros",
    "Microsoft",
    "Microtek",
    "MikroTik",
    "Milan",
    "Minolta",
    "Mitel",
    "Mitsubishi",
    "Mitsushita",
    "Molex",
    "Monster Cable",
    "Motorola",
    "MRV",
    "MSI",
    "Multitech",
    "Murata",
    "Mytel",
    "NAT",
    "National Semiconductor",
    "nBase",
    "NCR",
    "NEC",
    "NetApp",
    "Netgear",
    "Net-to-Net",
    "Newbridge",
    "Nikon",
    "Nimble Storage",
    "Nippon",
    "Nokia",
    "Norand",
    "Norstar",
    "Nortel",
    "Novell",
    "NR Systems",
    "NSC",
    "NVIDIA",
    "Octel",
    "OCZ Technology",
    "Okidata",
    "Olivetti",
    "Olympus",
    "ONS",
    "Opzoon",
    "Oracle",
    "Orange Networks",
    "Overland Storage",
    "Packard Bell",
    "Packeteer",
    "Palm",
    "Palo Alto",
    "Panasonic",
    "PAR",
    "Paradyne",
    "Perle Systems",
    "Philip Semiconductor",
    "Philips",
    "Phillips",
    "Pinnacle",
    "Pioneer",
    "PivotStor",
    "Planar Systems",
    "Plantronics",
    "Plasmon",
    "Polycom",
    "Powerware",
    "Printronix",
    "Procera Networks",
    "Proxim",
    "PSC",
    "PTX",
    "Pure Storage",
    "Q-Bit",
    "QLogic",
    "QMS",
    "QNC",
    "Qualcomm",
    "Quanta",
    "Quantum",
    "Quick Eagle Networks",
    "RackSolutions",
    "Radian",
    "Radiant Systems",
    "Radware",
    "Red Hat",
    "RGB Spectrum",
    "Ricoh",
    "Riverbed Technology",
    "Riverstone",
    "Rohm",
    "Rolm",
    "Ruckus Wireless",
    "Sagen",
    "SAM",
    "Samsung",
    "Samtec",
    "Samtron",
    "Sanyo",
    "Seagate",
    "Sealevel Systems",
    "SEC",
    "SGI",
    "Sharp",
    "Siemens",
    "SIG",
    "SimpleTech",
    "SL Power",
    "Snom Technology",
    "SonicWall",
    "Sony",
    "SpectraLink",
    "Spirent Communications",
    "StarTech",
    "STM",
    "StorageTek",
    "Sun",
    "Supermicro",
    "Symantec",
    "Symbol",
    "Symmetricom",
    "Symtech",
    "Systemax",
    "Tadiran",
    "Tally",
    "Tanberg Data",
    "Tandy",
    "Targus",
    "TDK-Lamda",
    "TEAC",
    "Tektronix",
    "Telco Systems",
    "Telect",
    "Teledyne",
    "Telex",
    "Tellabs",
    "Teltronics",
    "Telxon",
    "Texas",
    "Thomas & Betts",
    "TI",
    "TIE",
    "TippingPoint",
    "TLY",
    "Toshiba",
    "Transition",
    "Transition Networks",
    "TRENDnet",
    "Trident",
    "Trimm",
    "Tripp Lite",
    "Trompeter",
    "TSC",
    "Tyan",
    "Tyco",
    "Tycon Power Systems",
    "Ubiquiti Networks",
    "UCS",
    "Unicom",
    "Unify",
    "Unipac",
    "Unipower",
    "Unisphere",
    "Unisys",
    "Unitech",
    "Univac",
    "US Power",
    "US Robotics",
    "ValueRAM",
    "Vecima Networks",
    "Verbatim",
    "Verifone",
    "Verilink",
    "Veritas",
    "ViewSonic",
    "Viking",
    "Vishay",
    "Visual Networks",
    "VMware",
    "Vodavi",
    "Wang",
    "WatchGuard",
    "WD",
    "Westell",
    "Western Digital",
    "Win",
    "Wintec",
    "Wyse",
    "XEL",
    "Xerox",
    "Xilinx",
    "Xtreme Power",
    "Xyplex",
    "Yamaha",
    "Yealink",
    "Zebra Technologies",
    "Zhone",
    "Zilog",
    "ZTE",
)

# Built once at import; classification only reads it.
OEM_LOOKUP: Dict[str, str] = {normalize_oem_value(name): name for name in CANONICAL_MANUFACTURERS}

# Product-family keywords that identify a brand without naming it.
# Order matters: the first manufacturer with a matching alias wins.
OEM_ALIASES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Dell", ("dell", "emc", "poweredge")),
    ("HPE", ("hpe", "hewlett", "hp", "proliant", "dl", "bl")),
    ("Cisco", ("cisco", "cisco systems", "ucs", "nexus", "catalyst", "asa")),
    ("NetApp", ("netapp", "ontap", "aff", "fas", "filer")),
    ("Lenovo", ("lenovo", "ibm", "thinksystem")),
    ("Supermicro", ("supermicro", "smci")),
    ("Juniper", ("juniper",)),
    ("Arista", ("arista",)),
    ("Brocade", ("brocade",)),
    ("Ubiquiti", ("ubiquiti", "unifi", "edge")),
    ("Fortinet", ("fortinet", "fortigate")),
    ("Palo Alto", ("palo", "alto", "pa")),
    ("Extreme", ("extreme",)),
    ("Netgear", ("netgear",)),
    ("Huawei", ("huawei",)),
    ("VMware", ("vmware", "vsan", "esxi")),
)
