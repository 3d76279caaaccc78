"""
Woodland town names drawn for clearings when named titles are enabled.

Stored lowercase; the name generator title-cases them on the way out.
"""

from typing import List

TOWN_NAMES: List[str] = [
    "alderbrook", "ashford", "badgerholt", "barrowmere", "beechwick",
    "birchcombe", "blackthorn", "brackenridge", "brambledown", "briarwood",
    "burrowfield", "cedarhollow", "cloverdale", "crowhurst", "dappleford",
    "deepwater", "elderglen", "elmstead", "fallowmead", "fernhill",
    "foxgrove", "gorsemoor", "hawthorne", "hazelmere", "heatherton",
    "hedgeley", "hollowmere", "ivybridge", "juniper", "larchwood",
    "linden", "marshwick", "mossbank", "mudbrook", "nettlebed",
    "oakenshaw", "otterpool", "owlscroft", "pinecrest", "primrose",
    "quillcombe", "ravenscar", "reedham", "rookwood", "rowanby",
    "rushmere", "sallowfield", "sedgemoor", "sorrelford", "stoatley",
    "sweetbriar", "thistledown", "thornbury", "timberlake", "wainwood",
    "weaselbrook", "willowmere", "windfall", "wrenfield", "yewdale",
]


def load_default_names() -> List[str]:
    """Copy of the default pool, safe for callers to extend."""
    return list(TOWN_NAMES)
