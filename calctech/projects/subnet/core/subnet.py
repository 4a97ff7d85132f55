"""
IPv4 subnet math on dotted-quad strings.

Addresses are handled octet by octet; first/last usable host are the
network and broadcast addresses with the last octet moved by one.
"""
from calctech.core.errors import CalculatorInputError

PRIVATE_RANGES = (
    # (first octet, second octet low, second octet high)
    (10, 0, 255),
    (172, 16, 31),
    (192, 168, 168),
)


def is_valid_ipv4(text):
    """Four canonical decimal octets 0..255. "01" or "1.2.3" are rejected."""
    if not isinstance(text, str):
        return False
    parts = text.split(".")
    if len(parts) != 4:
        return False
    for part in parts:
        if not part.isdigit() or str(int(part)) != part or int(part) > 255:
            return False
    return True


def _octets(text):
    return [int(part) for part in text.split(".")]


def _dotted(octets):
    return ".".join(str(o) for o in octets)


def cidr_to_mask(cidr):
    mask = []
    for i in range(4):
        bits = max(0, min(8, cidr - i * 8))
        mask.append((0xff << (8 - bits)) & 0xff)
    return _dotted(mask)


def mask_to_cidr(mask):
    """Prefix length of a dotted mask. Raises on a non-contiguous mask."""
    bits = "".join(f"{octet:08b}" for octet in _octets(mask))
    if "01" in bits:
        raise CalculatorInputError("Invalid subnet mask format")
    return bits.count("1")


def ip_class(first_octet):
    if 1 <= first_octet <= 126:
        return "A"
    if 128 <= first_octet <= 191:
        return "B"
    if 192 <= first_octet <= 223:
        return "C"
    if 224 <= first_octet <= 239:
        return "D (Multicast)"
    if 240 <= first_octet <= 255:
        return "E (Reserved)"
    return ""


def ip_type(octets):
    for first, low, high in PRIVATE_RANGES:
        if octets[0] == first and low <= octets[1] <= high:
            return "Private"
    if octets[0] == 127:
        return "Loopback"
    return "Public"


def calculate_subnet(ip_address="", cidr=None, subnet_mask=None, use_subnet_mask=None):
    """
    Network details for an address and either a dotted mask or a CIDR prefix.

    When use_subnet_mask is None the mask is used if one is given.
    """
    ip_address = (ip_address or "").strip()
    if not is_valid_ipv4(ip_address):
        raise CalculatorInputError("Invalid IP address format")

    if use_subnet_mask is None:
        use_subnet_mask = bool(subnet_mask)

    if use_subnet_mask:
        subnet_mask = (subnet_mask or "").strip()
        if not is_valid_ipv4(subnet_mask):
            raise CalculatorInputError("Invalid subnet mask format")
        mask = subnet_mask
        cidr = mask_to_cidr(mask)
    else:
        if cidr is None or not 0 <= cidr <= 32:
            raise CalculatorInputError("CIDR notation must be between 0 and 32")
        mask = cidr_to_mask(cidr)

    ip_parts = _octets(ip_address)
    mask_parts = _octets(mask)
    wildcard_parts = [255 - m for m in mask_parts]
    network_parts = [ip & m for ip, m in zip(ip_parts, mask_parts)]
    broadcast_parts = [n | w for n, w in zip(network_parts, wildcard_parts)]

    total = 2 ** (32 - cidr)
    usable = max(0, total - 2)

    # /31 and /32 have no host range
    first_usable = last_usable = None
    if usable:
        first_usable = _dotted(network_parts[:3] + [network_parts[3] + 1])
        last_usable = _dotted(broadcast_parts[:3] + [broadcast_parts[3] - 1])

    return {
        "network_address": _dotted(network_parts),
        "broadcast_address": _dotted(broadcast_parts),
        "first_usable_ip": first_usable,
        "last_usable_ip": last_usable,
        "total_addresses": total,
        "usable_addresses": usable,
        "subnet_mask": mask,
        "wildcard_mask": _dotted(wildcard_parts),
        "binary_subnet_mask": ".".join(f"{m:08b}" for m in mask_parts),
        "ip_class": ip_class(ip_parts[0]),
        "ip_type": ip_type(ip_parts),
        "cidr": f"/{cidr}",
    }
