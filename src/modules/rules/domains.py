"""
Domain keys: what kind of test a check is.

Domains are colon-separated strings from general to specific:
- "attack:melee" - melee attack tests
- "attack:ranged" - ranged attack tests
- "check:toxic" - resisting a toxic environment
- "characteristic:ws" - Weapon Skill tests
- "skill:athletics" - Athletics tests
- "damage:melee" - melee damage rolls

A check declares every domain it belongs to. A modifier applies when its
single domain equals one of them. There is no prefix matching: a modifier
on "attack" does not touch a check declared only as "attack:melee".
"""

from typing import Iterable, List, Tuple, Union

SEPARATOR = ':'

ATTACK = 'attack'
ATTACK_MELEE = 'attack:melee'
ATTACK_RANGED = 'attack:ranged'
CHECK_TOXIC = 'check:toxic'
DAMAGE_MELEE = 'damage:melee'
DAMAGE_RANGED = 'damage:ranged'


def domain(*segments: str) -> str:
    """
    Build a domain key from segments.

    Examples:
        >>> domain('skill', 'athletics')
        'skill:athletics'
    """
    return SEPARATOR.join(str(s).strip() for s in segments if str(s).strip())


def characteristic_domain(abbrev: str) -> str:
    return domain('characteristic', abbrev)


def skill_domain(skill: str) -> str:
    return domain('skill', skill)


def expand_domain(key: str) -> List[str]:
    """
    Every level of a domain, general first.

    Callers that want a check to pick up modifiers at each level declare
    all of them explicitly.

    Examples:
        >>> expand_domain('skill:tech-use:repair')
        ['skill', 'skill:tech-use', 'skill:tech-use:repair']
    """
    segments = [s for s in key.split(SEPARATOR) if s]
    return [SEPARATOR.join(segments[:i]) for i in range(1, len(segments) + 1)]


def normalize_domains(domains: Union[str, Iterable[str], None]) -> Tuple[str, ...]:
    """
    Turn a declared domain (or domains) into an ordered, de-duplicated tuple.

    Blank and non-string entries are dropped. An empty tuple means the
    check declared no domain at all.
    """
    if domains is None:
        return ()
    if isinstance(domains, str):
        domains = [domains]

    seen = []
    for key in domains:
        if not isinstance(key, str):
            continue
        key = key.strip()
        if key and key not in seen:
            seen.append(key)
    return tuple(seen)


def domain_matches(key: str, domains: Iterable[str]) -> bool:
    """True if key is exactly one of the declared domains."""
    return key in domains
