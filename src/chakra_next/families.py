"""Chakra UI compound-component families.

Some Chakra components are only usable together with their sub-parts
(``Menu`` needs ``MenuButton``, ``MenuList`` ...), so requesting any member of
a family re-exports the whole group.
"""

from types import MappingProxyType

# ---------------------------------------------------------------------------
# Family table
# ---------------------------------------------------------------------------

# Declaration order matters: the first matching family wins.
COMPONENT_FAMILIES = MappingProxyType(
    {
        "Menu": (
            "Menu",
            "MenuButton",
            "MenuList",
            "MenuItem",
            "MenuItemOption",
            "MenuGroup",
            "MenuOptionGroup",
            "MenuDivider",
        ),
        "Popover": (
            "Popover",
            "PopoverTrigger",
            "PopoverContent",
            "PopoverHeader",
            "PopoverBody",
            "PopoverFooter",
            "PopoverArrow",
            "PopoverCloseButton",
        ),
        "Modal": (
            "Modal",
            "ModalOverlay",
            "ModalContent",
            "ModalHeader",
            "ModalFooter",
            "ModalBody",
            "ModalCloseButton",
        ),
        "Tabs": ("Tabs", "TabList", "Tab", "TabPanels", "TabPanel"),
        "Accordion": (
            "Accordion",
            "AccordionItem",
            "AccordionButton",
            "AccordionPanel",
            "AccordionIcon",
        ),
        # Key is not a member: "Form" itself is not a Chakra export.
        "Form": ("FormControl", "FormLabel", "FormErrorMessage", "FormHelperText"),
        "Table": (
            "Table",
            "Thead",
            "Tbody",
            "Tfoot",
            "Tr",
            "Th",
            "Td",
            "TableCaption",
            "TableContainer",
        ),
        "List": ("List", "ListItem", "ListIcon", "OrderedList", "UnorderedList"),
        "Breadcrumb": (
            "Breadcrumb",
            "BreadcrumbItem",
            "BreadcrumbLink",
            "BreadcrumbSeparator",
        ),
        "Stat": (
            "Stat",
            "StatLabel",
            "StatNumber",
            "StatHelpText",
            "StatArrow",
            "StatGroup",
        ),
        "Card": ("Card", "CardHeader", "CardBody", "CardFooter"),
        "Skeleton": ("Skeleton", "SkeletonCircle", "SkeletonText"),
        "NumberInput": (
            "NumberInput",
            "NumberInputField",
            "NumberInputStepper",
            "NumberIncrementStepper",
            "NumberDecrementStepper",
        ),
    }
)


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def find_family_key(component_name: str) -> str | None:
    """Return the key of the family *component_name* belongs to, if any."""
    for family, members in COMPONENT_FAMILIES.items():
        if component_name == family or component_name in members:
            return family
    return None


def get_component_family(component_name: str) -> list[str]:
    """Resolve a component name to the full list of names to re-export.

    Args:
        component_name: A family key or any member of a family

    Returns:
        The family members in declared order, or ``[component_name]`` when the
        name belongs to no family.
    """
    family = find_family_key(component_name)
    if family is None:
        return [component_name]
    return list(COMPONENT_FAMILIES[family])
