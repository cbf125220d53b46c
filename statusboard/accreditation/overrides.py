"""Per-element tracking overrides: ``code -> (priority, assignee, status)``.

Empty strings mean "no override" for that field. CQI codes correspond to the
PSQ codes of the previous edition.
"""

ELEMENT_OVERRIDES: dict[str, tuple[str, str, str]] = {
    "AAC.1.a": ("P0", "Gaurav", "Not started"),
    "AAC.1.b": ("Prev NC", "Kashish", "Completed"),
    "AAC.1.c": ("P2", "", "Blocked"),
    "AAC.1.d": ("P3", "", "Completed"),
    "AAC.2.a": ("P2", "Kashish", ""),
    "AAC.2.b": ("CORE", "", ""),
    "AAC.3.a": ("CORE", "", ""),
    "AAC.3.c": ("CORE", "", ""),
    "AAC.3.e": ("Prev NC", "Kashish", "Completed"),
    "AAC.4.g": ("Prev NC", "Kashish", "Completed"),
    "AAC.5.a": ("CORE", "", ""),
    "AAC.5.e": ("Prev NC", "Kashish", "Completed"),
    "AAC.5.h": ("Prev NC", "Kashish", "Completed"),
    "AAC.6.d": ("Prev NC", "Kashish", "Completed"),
    "AAC.7.c": ("Prev NC", "Kashish", "Completed"),
    # COP - Care of Patients
    # COP.1 - Uniform care with patient identification
    "COP.1.a": ("CORE", "", ""),
    # COP.2 - Emergency services
    "COP.2.b": ("CORE", "", ""),
    "COP.2.g": ("Prev NC", "Neesha", "Completed"),
    # COP.3 - CPR services
    "COP.3.b": ("Prev NC", "Neesha", "Completed"),
    "COP.3.d": ("Prev NC", "Neesha", "Completed"),
    # COP.4 - Nursing care
    "COP.4.a": ("CORE", "", ""),
    # COP.5 - Transfusion services
    "COP.5.b": ("CORE", "", ""),
    "COP.5.e": ("Prev NC", "", ""),
    # COP.6 - ICU/HDU care
    "COP.6.d": ("Prev NC", "", ""),
    # COP.7 - Obstetric care
    "COP.7.c": ("Prev NC", "", ""),
    "COP.7.d": ("Prev NC", "Neesha", "Completed"),
    # COP.9 - Procedural sedation
    "COP.9.b": ("Prev NC", "Neesha", "Completed"),
    "COP.9.d": ("Prev NC", "Neesha", "Completed"),
    "COP.9.e": ("Prev NC", "Neesha", "Completed"),
    # COP.10 - Anaesthesia services
    "COP.10.b": ("CORE", "", ""),
    "COP.10.e": ("CORE", "", ""),
    "COP.10.f": ("Prev NC", "Neesha", "Completed"),
    "COP.10.h": ("Prev NC", "Neesha", "Completed"),
    # COP.11 - Clinical procedures / OT
    "COP.11.d": ("CORE", "", ""),
    "COP.11.e": ("Prev NC", "Neesha", "Completed"),
    "COP.11.i": ("CORE", "", ""),
    "COP.11.j": ("CORE", "", ""),
    # COP.12 - High risk patients
    "COP.12.c": ("CORE", "", ""),
    "COP.12.d": ("CORE", "", ""),
    "COP.12.e": ("CORE", "", ""),
    # COP.13 - Pain, rehabilitation, nutrition
    "COP.13.b": ("Prev NC", "Neesha", "Completed"),
    "MOM.1.c": ("P2", "", ""),
    "MOM.1.d": ("P3", "", ""),
    "MOM.3.e": ("Prev NC", "", ""),
    "MOM.6.d": ("Prev NC", "", ""),
    "MOM.7.c": ("Prev NC", "", ""),
    "PRE.1.c": ("P2", "", ""),
    "PRE.1.d": ("P3", "", ""),
    "PRE.6.d": ("Prev NC", "", ""),
    "HIC.3.e": ("Prev NC", "", ""),
    "HIC.5.e": ("Prev NC", "", ""),
    "HIC.6.d": ("Prev NC", "", ""),
    "CQI.1.a": ("CORE", "Kashish", ""),
    "CQI.1.b": ("P2", "Kashish", ""),
    "CQI.1.c": ("CORE", "Kashish", "Blocked"),
    "CQI.1.d": ("CORE", "Kashish", "Completed"),
    "CQI.1.e": ("Prev NC", "Chandra", "Completed"),
    "CQI.1.f": ("P2", "Kashish", ""),
    "CQI.1.g": ("Prev NC", "Chandra", "Completed"),
    "CQI.1.h": ("P2", "Kashish", ""),
    "CQI.1.i": ("Prev NC", "Chandra", "Completed"),
    "CQI.2.a": ("P2", "Kashish", ""),
    "CQI.2.b": ("CORE", "Kashish", ""),
    "CQI.2.c": ("P2", "Kashish", ""),
    "CQI.2.d": ("CORE", "Kashish", ""),
    "CQI.2.e": ("P2", "Kashish", ""),
    "CQI.3.a": ("Prev NC", "Chandra", "Completed"),
    "CQI.3.b": ("Prev NC", "Chandra", "Completed"),
    "CQI.3.c": ("Prev NC", "Chandra", "Completed"),
    "CQI.3.d": ("Prev NC", "Chandra", "Completed"),
    "CQI.3.e": ("Prev NC", "Chandra", "Completed"),
    "CQI.4.a": ("P2", "Kashish", ""),
    "CQI.4.b": ("P2", "Kashish", ""),
    "CQI.4.c": ("P2", "Kashish", ""),
    "CQI.4.d": ("P2", "Kashish", ""),
    "CQI.5.a": ("CORE", "Kashish", "Completed"),
    "CQI.5.b": ("Prev NC", "Chandra", "Completed"),
    "CQI.5.c": ("P2", "Kashish", ""),
    "CQI.5.d": ("Prev NC", "Chandra", "Completed"),
    "CQI.5.e": ("P2", "Kashish", ""),
    "ROM.1.c": ("P2", "", ""),
    "ROM.1.d": ("P3", "", ""),
    "ROM.3.e": ("Prev NC", "", ""),
    "FMS.1.c": ("P2", "", ""),
    "FMS.1.d": ("P3", "", ""),
    "FMS.3.e": ("Prev NC", "", ""),
    "FMS.5.e": ("Prev NC", "", ""),
    "HRM.3.e": ("Prev NC", "", ""),
    "HRM.6.d": ("Prev NC", "", ""),
    "HRM.7.c": ("Prev NC", "", ""),
    "IMS.1.c": ("P2", "", ""),
    "IMS.1.d": ("P3", "", ""),
    "IMS.3.e": ("Prev NC", "", ""),
    "IMS.6.d": ("Prev NC", "", ""),
}
