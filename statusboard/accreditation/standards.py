"""NABH SHCO (Small Healthcare Organizations) standards, 3rd edition.

Released 31 August 2022, effective 1 August 2022. Objective elements are
grouped by chapter; each entry is ``(code, description, category)``.

Categories decide when an element is assessed:

- Core: mandatorily assessed during each assessment
- Commitment: assessed during the final assessment
- Achievement: assessed during surveillance
- Excellence: assessed during re-accreditation
"""

CORE = "Core"
COMMITMENT = "Commitment"
ACHIEVEMENT = "Achievement"
EXCELLENCE = "Excellence"

CATEGORIES = (CORE, COMMITMENT, ACHIEVEMENT, EXCELLENCE)

PATIENT_CENTRED = "Patient Centred"
ORGANISATION_CENTRED = "Organisation Centred"

CHAPTER_DEFINITIONS = [
    (
        "AAC",
        "Access, Assessment and Continuity of Care",
        PATIENT_CENTRED,
        [
            # AAC.1 - Organization defines and displays services
            ("AAC.1.a", "The services being provided are clearly defined and are in consonance with the needs of the community.", COMMITMENT),
            ("AAC.1.b", "The defined services are prominently displayed.", COMMITMENT),
            ("AAC.1.c", "The staff is oriented to these services.", COMMITMENT),
            # AAC.2 - Registration and admission process
            ("AAC.2.a", "Documented policies and procedures are used for registering and admitting patients.", COMMITMENT),
            ("AAC.2.b", "The documented procedures address out-patients, in-patients and emergency patients.", CORE),
            ("AAC.2.c", "A unique identification number is generated at the end of registration.", CORE),
            ("AAC.2.d", "Patients are accepted only if the organization can provide the required service.", COMMITMENT),
            ("AAC.2.e", "The documented policies and procedures also address managing patients during non-availability of beds.", COMMITMENT),
            ("AAC.2.f", "The staff is aware of these processes.", COMMITMENT),
            # AAC.3 - Transfer and referral mechanism
            ("AAC.3.a", "Documented policies and procedures exist for transfer of patients.", COMMITMENT),
            ("AAC.3.b", "Transfer-out is based on the patients condition and need for continuing care.", CORE),
            ("AAC.3.c", "Transfer process addresses the responsibility during transfer.", CORE),
            ("AAC.3.d", "A referral summary accompanies the patient.", CORE),
            ("AAC.3.e", "Transfer-in of patients is consistent with the organizations mission and resources.", COMMITMENT),
            # AAC.4 - Initial assessment
            ("AAC.4.a", "Documented policies and procedures define the scope and content of assessments.", CORE),
            ("AAC.4.b", "Initial medical assessment is done within 24 hours of admission or earlier as per patient condition.", CORE),
            ("AAC.4.c", "Initial nursing assessment is done within 24 hours of admission or earlier as per patient condition.", CORE),
            ("AAC.4.d", "Assessment is comprehensive covering medical, nursing and other needs.", COMMITMENT),
            ("AAC.4.e", "Assessments are documented in the patient record.", CORE),
            ("AAC.4.f", "Patients requiring emergency care undergo immediate assessment.", CORE),
            # AAC.5 - Reassessment
            ("AAC.5.a", "Patients are reassessed at appropriate intervals based on their condition and plan of care.", CORE),
            ("AAC.5.b", "Reassessment is done by a qualified individual.", COMMITMENT),
            ("AAC.5.c", "Reassessments are documented in the patient record.", CORE),
            ("AAC.5.d", "The care plan is modified based on the reassessment.", COMMITMENT),
            # AAC.6 - Laboratory services
            ("AAC.6.a", "Laboratory services are available as per the scope of the organization.", COMMITMENT),
            ("AAC.6.b", "Laboratory services are provided by qualified personnel.", CORE),
            ("AAC.6.c", "Standard operating procedures guide collection, identification, handling, safe transportation and disposal of specimens.", CORE),
            ("AAC.6.d", "Laboratory results are available in a timely manner.", COMMITMENT),
            ("AAC.6.e", "Critical results are communicated immediately to the concerned care provider.", CORE),
            ("AAC.6.f", "Outsourced laboratory services meet the organizations quality requirements.", COMMITMENT),
            # AAC.7 - Laboratory quality assurance
            ("AAC.7.a", "There is a quality assurance programme for laboratory services.", COMMITMENT),
            ("AAC.7.b", "Internal quality control is practiced.", COMMITMENT),
            ("AAC.7.c", "External quality assurance (EQAS) is practiced where available.", ACHIEVEMENT),
            ("AAC.7.d", "Laboratory safety procedures are established and implemented.", CORE),
            ("AAC.7.e", "Laboratory equipment is regularly calibrated and maintained.", COMMITMENT),
            # AAC.8 - Imaging services
            ("AAC.8.a", "Imaging services are available as per the scope of the organization.", CORE),
            ("AAC.8.b", "Imaging services are provided by qualified personnel.", CORE),
            ("AAC.8.c", "Standard operating procedures guide the imaging services.", COMMITMENT),
            ("AAC.8.d", "Imaging results are available in a timely manner.", COMMITMENT),
            ("AAC.8.e", "Radiation safety norms are adhered to.", CORE),
            ("AAC.8.f", "Outsourced imaging services meet the organizations quality requirements.", COMMITMENT),
            # AAC.9 - Imaging quality assurance
            ("AAC.9.a", "There is a quality assurance programme for imaging services.", COMMITMENT),
            ("AAC.9.b", "Imaging equipment is regularly calibrated and maintained.", COMMITMENT),
            ("AAC.9.c", "Personnel are monitored for radiation exposure.", CORE),
            # AAC.10 - Discharge process
            ("AAC.10.a", "Documented policies and procedures guide the discharge process.", COMMITMENT),
            ("AAC.10.b", "Discharge planning is initiated early in the care process.", COMMITMENT),
            ("AAC.10.c", "A discharge summary is provided to the patient at the time of discharge.", CORE),
            ("AAC.10.d", "The discharge summary includes relevant clinical and follow-up information.", CORE),
            ("AAC.10.e", "Patient and family are educated about medications, diet, and follow-up care.", CORE),
            ("AAC.10.f", "Patients leaving against medical advice are informed about risks.", CORE),
        ],
    ),
    (
        "COP",
        "Care of Patients",
        PATIENT_CENTRED,
        [
            # COP.1 - Uniform care to patients is provided in all settings
            ("COP.1.a", "The organization has a uniform process for identification of patients and at a minimum, uses two identifiers.", CORE),
            ("COP.1.b", "Care shall be provided in consonance with applicable laws and regulations.", COMMITMENT),
            ("COP.1.c", "The organization adopts evidence-based clinical practice guidelines and/or clinical protocols to guide uniform patient care.", ACHIEVEMENT),
            ("COP.1.d", "Care delivery is uniform for a given clinical condition when similar care is provided in more than one setting.", COMMITMENT),
            ("COP.1.e", "Telemedicine facility is provided safely and securely based on written guidance.", EXCELLENCE),
            # COP.2 - Emergency services including ambulance, and management of disasters
            ("COP.2.a", "There shall be an identified area in the organization, which is easily accessible to receive and manage emergency patients, with adequate and appropriate resources.", COMMITMENT),
            ("COP.2.b", "The organization manages medico-legal cases and provides emergency care in consonance with statutory requirements and in accordance with written guidance.", CORE),
            ("COP.2.c", "Initiation of appropriate care is guided by a system of triage.", COMMITMENT),
            ("COP.2.d", "Patients waiting in the emergency are reassessed as appropriate for the change in status.", COMMITMENT),
            ("COP.2.e", "Admission, discharge to home or transfer to another organization is documented, and a discharge note shall be given to the patient.", COMMITMENT),
            ("COP.2.f", "The organization shall implement a quality assurance programme.", ACHIEVEMENT),
            ("COP.2.g", "The organization has systems in place for the management of patients found dead on arrival and patients who die within a few minutes of arrival.", COMMITMENT),
            ("COP.2.h", "The organization has access to ambulance services commensurate with the scope of services provided by it.", COMMITMENT),
            ("COP.2.i", "The ambulance(s) is fit for purpose, is operated by trained personnel, is appropriately equipped, and ensures that emergency medications are available in the ambulance.", COMMITMENT),
            ("COP.2.j", "The emergency department identifies opportunities to initiate treatment at the earliest, when the patient is in transit to the organization.", EXCELLENCE),
            ("COP.2.k", "The organization manages potential community emergencies, epidemics and other disasters as per a documented plan.", COMMITMENT),
            # COP.3 - Cardio-pulmonary resuscitation services are provided uniformly
            ("COP.3.a", "Resuscitation services are available to patients at all times.", COMMITMENT),
            ("COP.3.b", "During cardiopulmonary resuscitation, assigned roles and responsibilities are complied with, and the events during cardiopulmonary resuscitation are recorded.", COMMITMENT),
            ("COP.3.c", "The equipment and medications for use during cardiopulmonary resuscitation are available in various areas of the organization.", COMMITMENT),
            ("COP.3.d", "A multidisciplinary committee does a post-event analysis of all cardiopulmonary resuscitations, and corrective and preventive measures are taken based on this.", COMMITMENT),
            # COP.4 - Nursing care is provided to patients in consonance with clinical protocols
            ("COP.4.a", "Nursing care is aligned and integrated with overall patient care, and is documented in the patient record.", CORE),
            ("COP.4.b", "Assignment of patient care is done as per current good clinical / nursing practice guidelines.", COMMITMENT),
            ("COP.4.c", "Nurses are provided with appropriate and adequate equipment for providing safe and efficient nursing services.", COMMITMENT),
            ("COP.4.d", "The organization develops and implements nursing clinical practice guidelines reflecting current standards of practice.", EXCELLENCE),
            # COP.5 - Transfusion services are provided as per the scope of services, safely
            ("COP.5.a", "Transfusion services are commensurate with the services provided by the organization, and are governed by the applicable laws and regulations.", COMMITMENT),
            ("COP.5.b", "Transfusion of blood and blood components is done safely.", CORE),
            ("COP.5.c", "Blood and blood components are used rationally.", COMMITMENT),
            ("COP.5.d", "Informed consent is obtained for transfusion of blood and blood products, and for donation.", COMMITMENT),
            ("COP.5.e", "Blood/blood components are available for use in emergency situations within a defined time frame.", COMMITMENT),
            ("COP.5.f", "Post-transfusion form is collected, reactions if any identified and are analysed for corrective and preventive actions.", ACHIEVEMENT),
            # COP.6 - Organization provides care in the intensive care and high dependency units
            ("COP.6.a", "The defined admission and discharge criteria for its intensive care and high dependency units are implemented, and defined procedures for the situation of bed shortages are followed.", COMMITMENT),
            ("COP.6.b", "The care is provided in intensive care and high dependency units based on written guidance by adequately available staff and equipment.", COMMITMENT),
            ("COP.6.c", "Infection control practices are documented and followed.", COMMITMENT),
            ("COP.6.d", "The organization shall implement a quality-assurance programme.", ACHIEVEMENT),
            ("COP.6.e", "The organisation has a mechanism to counsel the patient and / or family periodically.", COMMITMENT),
            ("COP.6.f", "End of life care is provided in a consistent manner in the organization, and is in consonance with legal requirements.", COMMITMENT),
            # COP.7 - Organization provides safe obstetric care
            ("COP.7.a", "Obstetric services are organised and provided safely.", COMMITMENT),
            ("COP.7.b", "The organization identifies and provides care to high risk obstetric cases with competent doctors and nurses, and where needed, refers them to another appropriate centre.", COMMITMENT),
            ("COP.7.c", "Antenatal assessment also includes maternal nutrition.", COMMITMENT),
            ("COP.7.d", "Appropriate peri-natal and post-natal monitoring is performed.", COMMITMENT),
            ("COP.7.e", "The organization caring for high risk obstetric cases has the human resources and facilities to take care of neonates of such cases.", COMMITMENT),
            # COP.8 - Organization provides safe paediatric services
            ("COP.8.a", "Paediatric services are organised and provided safely.", COMMITMENT),
            ("COP.8.b", "Neonatal care is in consonance with the national/ international guidelines.", COMMITMENT),
            ("COP.8.c", "Those who care for children have age-specific competency.", COMMITMENT),
            ("COP.8.d", "Provisions are made for special care of children.", COMMITMENT),
            ("COP.8.e", "Patient assessment includes nutritional, growth, developmental and immunisation assessment.", COMMITMENT),
            ("COP.8.f", "The organization has measures in place to prevent child/neonate abduction and abuse.", COMMITMENT),
            # COP.9 - Procedural sedation is provided consistently and safely
            ("COP.9.a", "Procedural sedation is administered in a consistent manner.", COMMITMENT),
            ("COP.9.b", "Informed consent for administration of procedural sedation is obtained.", COMMITMENT),
            ("COP.9.c", "Competent and trained persons perform and monitor sedation.", COMMITMENT),
            ("COP.9.d", "Intra-procedure monitoring includes at a minimum the heart rate, cardiac rhythm, respiratory rate, blood pressure, oxygen saturation, and level of sedation.", COMMITMENT),
            ("COP.9.e", "Post procedure monitoring is documented, and patients are discharged from the recovery area based on objective criteria.", COMMITMENT),
            # COP.10 - Anaesthesia services are provided consistently and safely
            ("COP.10.a", "Anaesthesia services are administered in a consistent and safe manner.", COMMITMENT),
            ("COP.10.b", "The pre-anaesthesia assessment results in the formulation of an anaesthesia plan which is documented.", CORE),
            ("COP.10.c", "A pre-induction assessment is performed and documented.", COMMITMENT),
            ("COP.10.d", "Informed consent for administration of anaesthesia, is obtained.", COMMITMENT),
            ("COP.10.e", "Patients are monitored while under anaesthesia.", CORE),
            ("COP.10.f", "Post anaesthesia monitoring is documented, and patients are discharged from the recovery area based on objective criteria.", COMMITMENT),
            ("COP.10.g", "The type of anaesthesia and anaesthetic medications used are documented in the patient record.", COMMITMENT),
            ("COP.10.h", "Intra-operative adverse anaesthesia events are recorded and monitored.", ACHIEVEMENT),
            # COP.11 - Clinical procedures, as well as procedures in the operation theatre
            ("COP.11.a", "Clinical procedures as well as procedures done in operation theatres are done in a consistent and safe manner.", COMMITMENT),
            ("COP.11.b", "Surgical patients have a preoperative assessment, a documented pre-operative diagnosis, and pre-operative instructions provided before surgery and documented.", COMMITMENT),
            ("COP.11.c", "Informed consent is obtained by the doctor prior to the procedure.", COMMITMENT),
            ("COP.11.d", "Care is taken to prevent adverse events like wrong site, wrong patient and wrong surgery.", CORE),
            ("COP.11.e", "The procedure is done adhering to standard precautions.", COMMITMENT),
            ("COP.11.f", "Procedures / operation notes, post procedure monitoring and post-operative care plan are documented accurately in the patient record.", COMMITMENT),
            ("COP.11.g", "Appropriate facilities, equipment, instruments and supplies are available in the operating theatre.", COMMITMENT),
            ("COP.11.h", "The organization shall implement a quality assurance programme.", ACHIEVEMENT),
            ("COP.11.i", "The organ transplant program shall be in consonance with the legal requirements and shall be conducted ethically.", CORE),
            ("COP.11.j", "The organization shall take measures to create awareness regarding organ donation.", CORE),
            # COP.12 - The organization identifies and manages patients who are at higher risk of morbidity and mortality
            ("COP.12.a", "The organization identifies and manages vulnerable patients.", COMMITMENT),
            ("COP.12.b", "The organization provides for a safe and secure environment for the vulnerable patient.", COMMITMENT),
            ("COP.12.c", "The organization identifies and manages patients who are at risk of fall.", CORE),
            ("COP.12.d", "The organization identifies and manages patients who are at risk of developing / worsening of pressure ulcers.", CORE),
            ("COP.12.e", "The organization identifies and manages patients who are at risk of developing / worsening of developing deep vein thrombosis.", CORE),
            ("COP.12.f", "The organization identifies and manages patients who need restraints.", COMMITMENT),
            # COP.13 - Pain management, rehabilitation services and nutritional therapy
            ("COP.13.a", "Patients in pain are effectively managed.", COMMITMENT),
            ("COP.13.b", "Pain alleviation measures or medications are initiated and titrated according to the patient's need and response.", COMMITMENT),
            ("COP.13.c", "Scope of rehabilitation services at a minimum is commensurate to the services provided by the organization.", COMMITMENT),
            ("COP.13.d", "Care providers collaboratively plan rehabilitation services.", COMMITMENT),
            ("COP.13.e", "Patients admitted to the organization are screened for nutritional risk, and assessment is done for patients found at risk during nutritional screening.", COMMITMENT),
            ("COP.13.f", "The therapeutic diet is planned and provided collaboratively.", COMMITMENT),
        ],
    ),
    (
        "MOM",
        "Management of Medication",
        PATIENT_CENTRED,
        [
            # MOM.1 - Pharmacy services organization
            ("MOM.1.a", "Pharmacy services are organized to meet patient needs.", COMMITMENT),
            ("MOM.1.b", "Pharmacy services are available 24x7 or as per organizational policy.", COMMITMENT),
            ("MOM.1.c", "A qualified pharmacist supervises pharmacy operations.", CORE),
            ("MOM.1.d", "A formulary appropriate to the organization is developed and maintained.", COMMITMENT),
            ("MOM.1.e", "Medications are stored under proper conditions.", CORE),
            ("MOM.1.f", "Expiry of medications is monitored.", CORE),
            # MOM.2 - Prescription
            ("MOM.2.a", "Medications are prescribed by authorized personnel.", CORE),
            ("MOM.2.b", "Prescriptions are legible and complete.", CORE),
            ("MOM.2.c", "Look-alike, sound-alike medications are identified and managed.", CORE),
            ("MOM.2.d", "High-risk medications are identified and managed safely.", CORE),
            ("MOM.2.e", "Verbal and telephone orders are minimized and verified.", COMMITMENT),
            # MOM.3 - Dispensing
            ("MOM.3.a", "Medications are dispensed by qualified personnel.", CORE),
            ("MOM.3.b", "Prescriptions are verified before dispensing.", CORE),
            ("MOM.3.c", "Patients are counseled about medications.", COMMITMENT),
            ("MOM.3.d", "Dispensing records are maintained.", COMMITMENT),
            # MOM.4 - Administration
            ("MOM.4.a", "Medications are administered by trained and authorized personnel.", CORE),
            ("MOM.4.b", "Patient identification is verified before medication administration.", CORE),
            ("MOM.4.c", "Medication administration is documented.", CORE),
            ("MOM.4.d", "Self-administration is supervised when permitted.", COMMITMENT),
            # MOM.5 - Adverse drug events
            ("MOM.5.a", "Adverse drug events are defined.", COMMITMENT),
            ("MOM.5.b", "Patients are monitored for adverse drug events.", CORE),
            ("MOM.5.c", "Adverse drug events are documented and reported.", CORE),
            ("MOM.5.d", "Appropriate action is taken for adverse drug events.", CORE),
            # MOM.6 - Medical gases
            ("MOM.6.a", "Medical gases are stored safely.", CORE),
            ("MOM.6.b", "Medical gases are administered by trained personnel.", CORE),
            ("MOM.6.c", "Stock levels of medical gases are monitored.", COMMITMENT),
        ],
    ),
    (
        "PRE",
        "Patient Rights and Education",
        PATIENT_CENTRED,
        [
            # PRE.1 - Patient rights and responsibilities
            ("PRE.1.a", "Patient rights are documented and displayed.", CORE),
            ("PRE.1.b", "Patient responsibilities are communicated.", COMMITMENT),
            ("PRE.1.c", "Staff is trained on patient rights.", COMMITMENT),
            ("PRE.1.d", "Patient privacy is maintained during care.", CORE),
            ("PRE.1.e", "Confidentiality of patient information is maintained.", CORE),
            ("PRE.1.f", "Patients are protected from physical abuse.", CORE),
            # PRE.2 - Beliefs and values
            ("PRE.2.a", "Patient beliefs and values are respected.", COMMITMENT),
            ("PRE.2.b", "Cultural and religious preferences are accommodated.", COMMITMENT),
            ("PRE.2.c", "Patients are involved in decision making about their care.", COMMITMENT),
            ("PRE.2.d", "Patients can refuse treatment after being informed of consequences.", CORE),
            # PRE.3 - Informed consent
            ("PRE.3.a", "A documented consent policy exists.", COMMITMENT),
            ("PRE.3.b", "Informed consent is obtained for procedures and surgeries.", CORE),
            ("PRE.3.c", "Consent includes information about risks, benefits and alternatives.", CORE),
            ("PRE.3.d", "Consent is obtained by the treating physician.", CORE),
            ("PRE.3.e", "General consent is obtained at admission.", COMMITMENT),
            ("PRE.3.f", "Consent for high-risk procedures is specifically documented.", CORE),
            # PRE.4 - Patient education
            ("PRE.4.a", "Patients are informed about their diagnosis.", CORE),
            ("PRE.4.b", "Patients are informed about planned treatment and care.", CORE),
            ("PRE.4.c", "Patients are educated about medications.", COMMITMENT),
            ("PRE.4.d", "Patients are educated about diet and nutrition.", COMMITMENT),
            ("PRE.4.e", "Patients are educated about safe and effective use of equipment.", COMMITMENT),
            ("PRE.4.f", "Patient education is documented.", COMMITMENT),
            # PRE.5 - Grievances
            ("PRE.5.a", "A grievance redressal mechanism exists.", COMMITMENT),
            ("PRE.5.b", "Patients are informed about the grievance mechanism.", COMMITMENT),
            ("PRE.5.c", "Grievances are documented and addressed.", COMMITMENT),
            ("PRE.5.d", "Feedback is used for improvement.", ACHIEVEMENT),
        ],
    ),
    (
        "HIC",
        "Hospital Infection Control",
        PATIENT_CENTRED,
        [
            # HIC.1 - Infection control programme
            ("HIC.1.a", "An infection control programme is in place.", COMMITMENT),
            ("HIC.1.b", "An infection control team/committee exists.", COMMITMENT),
            ("HIC.1.c", "Standard precautions are adhered to at all times.", CORE),
            ("HIC.1.d", "Hand hygiene practices are followed.", CORE),
            ("HIC.1.e", "Personal protective equipment is available and used appropriately.", CORE),
            ("HIC.1.f", "Cleanliness and general hygiene of facilities is maintained.", CORE),
            # HIC.2 - Infection control manual and surveillance
            ("HIC.2.a", "An infection control manual exists.", COMMITMENT),
            ("HIC.2.b", "The manual is periodically reviewed and updated.", ACHIEVEMENT),
            ("HIC.2.c", "Surveillance of hospital-associated infections is conducted.", COMMITMENT),
            ("HIC.2.d", "Surveillance data is analyzed and used for improvement.", ACHIEVEMENT),
            # HIC.3 - Prevention of HAI
            ("HIC.3.a", "Measures are taken to prevent surgical site infections.", CORE),
            ("HIC.3.b", "Measures are taken to prevent catheter-associated urinary tract infections.", CORE),
            ("HIC.3.c", "Measures are taken to prevent central line-associated bloodstream infections.", CORE),
            ("HIC.3.d", "Measures are taken to prevent ventilator-associated pneumonia.", CORE),
            ("HIC.3.e", "Isolation practices are implemented when needed.", CORE),
            ("HIC.3.f", "Staff safety measures are in place.", COMMITMENT),
            # HIC.4 - Sterilization
            ("HIC.4.a", "A central sterile supply department/area exists.", COMMITMENT),
            ("HIC.4.b", "Sterilization procedures are documented.", COMMITMENT),
            ("HIC.4.c", "Sterilization is monitored using appropriate indicators.", CORE),
            ("HIC.4.d", "Sterile supplies are stored and handled appropriately.", CORE),
            ("HIC.4.e", "Equipment cleaning and disinfection practices are followed.", CORE),
            # HIC.5 - Biomedical waste
            ("HIC.5.a", "Biomedical waste is segregated at source.", CORE),
            ("HIC.5.b", "Color-coded bins and bags are used.", CORE),
            ("HIC.5.c", "Biomedical waste is transported safely.", CORE),
            ("HIC.5.d", "Biomedical waste is disposed as per regulations.", CORE),
            ("HIC.5.e", "Records of biomedical waste disposal are maintained.", COMMITMENT),
            ("HIC.5.f", "Staff is trained in biomedical waste management.", COMMITMENT),
            # HIC.6 - Management support and training
            ("HIC.6.a", "Management supports the infection control program.", COMMITMENT),
            ("HIC.6.b", "Staff is trained on infection control practices.", CORE),
            ("HIC.6.c", "Resources are allocated for infection control.", COMMITMENT),
            ("HIC.6.d", "Infection control compliance is monitored.", ACHIEVEMENT),
            # HIC.7 - Laundry and linen
            ("HIC.7.a", "Laundry services are organized appropriately.", COMMITMENT),
            ("HIC.7.b", "Infected linen is handled separately.", CORE),
            ("HIC.7.c", "Clean and soiled linen are stored separately.", CORE),
            ("HIC.7.d", "Staff handling linen use appropriate protection.", COMMITMENT),
        ],
    ),
    (
        "CQI",
        "Continuous Quality Improvement",
        ORGANISATION_CENTRED,
        [
            # CQI.1 - Quality assurance programme
            ("CQI.1.a", "A quality assurance programme is in place.", COMMITMENT),
            ("CQI.1.b", "Quality objectives are defined.", COMMITMENT),
            ("CQI.1.c", "Quality improvement activities are conducted.", ACHIEVEMENT),
            ("CQI.1.d", "A quality committee/team exists.", COMMITMENT),
            # CQI.2 - Key indicators
            ("CQI.2.a", "Key indicators are identified for clinical areas.", COMMITMENT),
            ("CQI.2.b", "Key indicators are identified for managerial areas.", COMMITMENT),
            ("CQI.2.c", "Data is collected and analyzed.", COMMITMENT),
            ("CQI.2.d", "Results are used for improvement.", ACHIEVEMENT),
            ("CQI.2.e", "Benchmarking is done where possible.", EXCELLENCE),
            # CQI.3 - Patient safety programme
            ("CQI.3.a", "A patient safety programme is in place.", COMMITMENT),
            ("CQI.3.b", "Patient identification is ensured before any procedure.", CORE),
            ("CQI.3.c", "Communication is standardized for handovers.", CORE),
            ("CQI.3.d", "High-alert medications are managed safely.", CORE),
            ("CQI.3.e", "Surgical safety is ensured.", CORE),
            ("CQI.3.f", "Fall prevention measures are in place.", CORE),
            ("CQI.3.g", "Pressure ulcer prevention measures are in place.", COMMITMENT),
            # CQI.4 - Incident reporting
            ("CQI.4.a", "An incident reporting system exists.", COMMITMENT),
            ("CQI.4.b", "Incidents are reported without fear of punitive action.", COMMITMENT),
            ("CQI.4.c", "Incidents are analyzed and action is taken.", COMMITMENT),
            ("CQI.4.d", "Learning from incidents is shared.", ACHIEVEMENT),
            # CQI.5 - Audit
            ("CQI.5.a", "Medical audits are conducted.", ACHIEVEMENT),
            ("CQI.5.b", "Nursing audits are conducted.", ACHIEVEMENT),
            ("CQI.5.c", "Audit findings are used for improvement.", ACHIEVEMENT),
            # CQI.6 - Sentinel events
            ("CQI.6.a", "Sentinel events are defined.", COMMITMENT),
            ("CQI.6.b", "Root cause analysis is conducted for sentinel events.", CORE),
            ("CQI.6.c", "Corrective actions are implemented.", CORE),
            ("CQI.6.d", "Effectiveness of corrective actions is monitored.", COMMITMENT),
            # CQI.7 - Satisfaction
            ("CQI.7.a", "Patient satisfaction is measured.", COMMITMENT),
            ("CQI.7.b", "Employee satisfaction is measured.", ACHIEVEMENT),
            ("CQI.7.c", "Results are analyzed and used for improvement.", ACHIEVEMENT),
        ],
    ),
    (
        "ROM",
        "Responsibilities of Management",
        ORGANISATION_CENTRED,
        [
            # ROM.1 - Management responsibilities
            ("ROM.1.a", "The governance structure is defined.", COMMITMENT),
            ("ROM.1.b", "Responsibilities of management are documented.", COMMITMENT),
            ("ROM.1.c", "Management reviews organizational performance.", COMMITMENT),
            # ROM.2 - Department services
            ("ROM.2.a", "Services of each department are defined.", COMMITMENT),
            ("ROM.2.b", "Department heads are accountable for their services.", COMMITMENT),
            ("ROM.2.c", "Coordination between departments exists.", COMMITMENT),
            # ROM.3 - Ethical management
            ("ROM.3.a", "Ethical practices are followed.", COMMITMENT),
            ("ROM.3.b", "Conflict of interest is managed.", COMMITMENT),
            ("ROM.3.c", "Professional ethics are upheld.", COMMITMENT),
            ("ROM.3.d", "Transparency in dealings is maintained.", COMMITMENT),
            # ROM.4 - Qualified leadership
            ("ROM.4.a", "The organization has a qualified head/administrator.", CORE),
            ("ROM.4.b", "The head has appropriate authority and responsibility.", COMMITMENT),
            ("ROM.4.c", "The head ensures compliance with laws and regulations.", CORE),
            # ROM.5 - Patient safety and risk management
            ("ROM.5.a", "Patient safety is a priority for management.", CORE),
            ("ROM.5.b", "Risk management processes are in place.", COMMITMENT),
            ("ROM.5.c", "Resources are allocated for safety initiatives.", COMMITMENT),
            ("ROM.5.d", "Safety culture is promoted.", ACHIEVEMENT),
            # ROM.6 - Strategic planning
            ("ROM.6.a", "A strategic plan exists.", ACHIEVEMENT),
            ("ROM.6.b", "An operational plan exists.", COMMITMENT),
            ("ROM.6.c", "Plans are reviewed and updated periodically.", ACHIEVEMENT),
            # ROM.7 - Statutory compliance
            ("ROM.7.a", "All required licenses and registrations are in place.", CORE),
            ("ROM.7.b", "Licenses are renewed in a timely manner.", CORE),
            ("ROM.7.c", "Compliance with statutory requirements is monitored.", COMMITMENT),
        ],
    ),
    (
        "FMS",
        "Facilities Management and Safety",
        ORGANISATION_CENTRED,
        [
            # FMS.1 - Regulatory compliance
            ("FMS.1.a", "Applicable laws and regulations are identified.", COMMITMENT),
            ("FMS.1.b", "Compliance with building codes is maintained.", CORE),
            ("FMS.1.c", "Required facility inspections are completed.", CORE),
            ("FMS.1.d", "Non-conformities are addressed.", COMMITMENT),
            # FMS.2 - Safe environment
            ("FMS.2.a", "The facility is designed for patient safety.", COMMITMENT),
            ("FMS.2.b", "Safety hazards are identified and addressed.", CORE),
            ("FMS.2.c", "Security measures are in place.", CORE),
            ("FMS.2.d", "Access control is implemented.", COMMITMENT),
            ("FMS.2.e", "Signage and wayfinding are adequate.", COMMITMENT),
            # FMS.3 - Equipment management
            ("FMS.3.a", "Equipment inventory is maintained.", COMMITMENT),
            ("FMS.3.b", "Equipment is regularly inspected and maintained.", CORE),
            ("FMS.3.c", "Preventive maintenance schedules are followed.", COMMITMENT),
            ("FMS.3.d", "Staff is trained to operate equipment.", CORE),
            ("FMS.3.e", "Equipment malfunctions are reported and addressed.", COMMITMENT),
            # FMS.4 - Utilities
            ("FMS.4.a", "Safe drinking water is available.", CORE),
            ("FMS.4.b", "Water quality is tested regularly.", COMMITMENT),
            ("FMS.4.c", "Electricity supply is reliable with backup arrangements.", CORE),
            ("FMS.4.d", "Medical gases are safely stored and supplied.", CORE),
            ("FMS.4.e", "Vacuum systems are maintained.", COMMITMENT),
            # FMS.5 - Fire safety
            ("FMS.5.a", "A fire safety plan exists.", CORE),
            ("FMS.5.b", "Fire detection and suppression equipment is in place.", CORE),
            ("FMS.5.c", "Fire evacuation routes are marked and unobstructed.", CORE),
            ("FMS.5.d", "Fire drills are conducted regularly.", CORE),
            ("FMS.5.e", "Staff is trained in fire safety.", CORE),
            ("FMS.5.f", "Non-fire emergency plans exist.", COMMITMENT),
            # FMS.6 - Smoking policy
            ("FMS.6.a", "A no-smoking policy is in place.", CORE),
            ("FMS.6.b", "No-smoking signs are displayed.", COMMITMENT),
            ("FMS.6.c", "The policy is enforced.", COMMITMENT),
            # FMS.7 - Disaster management
            ("FMS.7.a", "A disaster management plan exists.", COMMITMENT),
            ("FMS.7.b", "Roles and responsibilities are defined.", COMMITMENT),
            ("FMS.7.c", "Mock drills are conducted.", ACHIEVEMENT),
            ("FMS.7.d", "Coordination with external agencies exists.", ACHIEVEMENT),
            # FMS.8 - Hazardous materials
            ("FMS.8.a", "Hazardous materials are identified.", COMMITMENT),
            ("FMS.8.b", "Material Safety Data Sheets (MSDS) are available.", COMMITMENT),
            ("FMS.8.c", "Hazardous materials are stored safely.", CORE),
            ("FMS.8.d", "Staff handling hazardous materials is trained.", CORE),
            ("FMS.8.e", "Spill management procedures are in place.", COMMITMENT),
            # FMS.9 - Security
            ("FMS.9.a", "Security personnel/systems are in place.", COMMITMENT),
            ("FMS.9.b", "Vulnerable areas are secured.", CORE),
            ("FMS.9.c", "Visitor management system exists.", COMMITMENT),
            ("FMS.9.d", "Vehicle parking is organized.", COMMITMENT),
        ],
    ),
    (
        "HRM",
        "Human Resource Management",
        ORGANISATION_CENTRED,
        [
            # HRM.1 - HR planning
            ("HRM.1.a", "Staffing requirements are defined.", COMMITMENT),
            ("HRM.1.b", "Staffing patterns are based on patient care needs.", COMMITMENT),
            ("HRM.1.c", "Nurse-patient ratio is maintained.", CORE),
            # HRM.2 - Recruitment
            ("HRM.2.a", "Job descriptions exist for all positions.", COMMITMENT),
            ("HRM.2.b", "Recruitment process is documented.", COMMITMENT),
            ("HRM.2.c", "Credentials are verified before appointment.", CORE),
            ("HRM.2.d", "Background verification is done.", COMMITMENT),
            # HRM.3 - Induction
            ("HRM.3.a", "Induction training programme exists.", COMMITMENT),
            ("HRM.3.b", "New staff receive orientation to policies and procedures.", COMMITMENT),
            ("HRM.3.c", "Induction includes patient safety and infection control.", CORE),
            # HRM.4 - Training and development
            ("HRM.4.a", "Training needs are identified.", COMMITMENT),
            ("HRM.4.b", "Training programmes are conducted.", COMMITMENT),
            ("HRM.4.c", "Training records are maintained.", COMMITMENT),
            ("HRM.4.d", "Effectiveness of training is evaluated.", ACHIEVEMENT),
            # HRM.5 - Job-specific training
            ("HRM.5.a", "Training is aligned with job requirements.", COMMITMENT),
            ("HRM.5.b", "Competency is assessed.", COMMITMENT),
            ("HRM.5.c", "Staff maintain required qualifications.", COMMITMENT),
            # HRM.6 - Safety and quality training
            ("HRM.6.a", "Staff are trained on patient safety.", CORE),
            ("HRM.6.b", "Staff are trained on infection control.", CORE),
            ("HRM.6.c", "Staff are trained on fire safety.", CORE),
            ("HRM.6.d", "Staff are trained on basic life support.", CORE),
            # HRM.7 - Performance appraisal
            ("HRM.7.a", "A performance appraisal system exists.", COMMITMENT),
            ("HRM.7.b", "Appraisals are conducted periodically.", COMMITMENT),
            ("HRM.7.c", "Feedback is provided to staff.", ACHIEVEMENT),
            # HRM.8 - Disciplinary and grievance
            ("HRM.8.a", "Disciplinary process is documented.", COMMITMENT),
            ("HRM.8.b", "Grievance handling mechanism exists.", COMMITMENT),
            ("HRM.8.c", "Processes are implemented fairly.", COMMITMENT),
            # HRM.9 - Staff wellbeing
            ("HRM.9.a", "Staff health check-ups are conducted.", COMMITMENT),
            ("HRM.9.b", "Staff immunization is ensured.", CORE),
            ("HRM.9.c", "Staff safety is addressed.", COMMITMENT),
            ("HRM.9.d", "Post-exposure prophylaxis is available.", CORE),
            # HRM.10 - Personnel records
            ("HRM.10.a", "Personal files are maintained for all staff.", COMMITMENT),
            ("HRM.10.b", "Files contain relevant documents and credentials.", COMMITMENT),
            ("HRM.10.c", "Records are kept confidential.", COMMITMENT),
            # HRM.11 - Credentialing
            ("HRM.11.a", "Credentialing process is defined.", COMMITMENT),
            ("HRM.11.b", "Medical professionals are credentialed before practice.", CORE),
            ("HRM.11.c", "Privileges are granted based on qualifications and competence.", CORE),
            ("HRM.11.d", "Re-credentialing is done periodically.", ACHIEVEMENT),
        ],
    ),
    (
        "IMS",
        "Information Management System",
        ORGANISATION_CENTRED,
        [
            # IMS.1 - Information management system
            ("IMS.1.a", "An information management system is in place.", COMMITMENT),
            ("IMS.1.b", "Information needs are identified.", COMMITMENT),
            ("IMS.1.c", "Information is available for decision making.", COMMITMENT),
            # IMS.2 - Medical records
            ("IMS.2.a", "A policy for medical records exists.", COMMITMENT),
            ("IMS.2.b", "Medical records contain all relevant clinical information.", CORE),
            ("IMS.2.c", "Entries are dated, timed and signed.", CORE),
            ("IMS.2.d", "Records are legible.", CORE),
            ("IMS.2.e", "Corrections in records are done appropriately.", COMMITMENT),
            # IMS.3 - Storage and retrieval
            ("IMS.3.a", "Records are stored securely.", CORE),
            ("IMS.3.b", "Retention period is defined and followed.", COMMITMENT),
            ("IMS.3.c", "Records are retrievable when needed.", CORE),
            ("IMS.3.d", "Access to records is controlled.", CORE),
            # IMS.4 - Protection
            ("IMS.4.a", "Records are protected from loss and damage.", CORE),
            ("IMS.4.b", "Confidentiality of records is maintained.", CORE),
            ("IMS.4.c", "Unauthorized access is prevented.", CORE),
            ("IMS.4.d", "Backup and recovery procedures exist for electronic records.", COMMITMENT),
            # IMS.5 - Reporting
            ("IMS.5.a", "Statutory reporting requirements are identified.", COMMITMENT),
            ("IMS.5.b", "Reports are submitted in a timely manner.", COMMITMENT),
            ("IMS.5.c", "Notifiable diseases are reported.", CORE),
            # IMS.6 - Data use
            ("IMS.6.a", "Data is analyzed for trends.", COMMITMENT),
            ("IMS.6.b", "Information is used for planning.", ACHIEVEMENT),
            ("IMS.6.c", "Information supports quality improvement.", ACHIEVEMENT),
            # IMS.7 - Abbreviations
            ("IMS.7.a", "A list of approved abbreviations exists.", COMMITMENT),
            ("IMS.7.b", "A list of prohibited abbreviations exists.", COMMITMENT),
            ("IMS.7.c", "Staff is aware of the abbreviation policy.", COMMITMENT),
        ],
    ),
]
