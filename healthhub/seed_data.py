"""
Dati iniziali (seed) delle collezioni.

Sono costanti "grezze" nella forma durevole (chiavi camelCase): le legge solo
la routine di inizializzazione, che le valida prima di scriverle.
"""
from __future__ import annotations

_IMG = "https://images.unsplash.com/photo-{}?w=400&h=200&fit=crop&crop=center"
_FACE = "https://images.unsplash.com/photo-{}?w=400&h=400&fit=crop&crop=face"


# =========================
# Sessione demo
# =========================
DEMO_PROFILE: dict = {
    "name": "Samuel Rick",
    "role": "patient",
    "email": "samuelrick1219@gmail.com",
    "age": 21,
    "gender": "male",
    "phone": "70134 02809",
    "address": "vijawada",
}


# =========================
# Medici e ospedali
# =========================
_DOCTORS = [
    # id, nome, specializzazione, ospedale, esperienza, orari, qualifica, onorario, foto
    (1, "Dr. Arjun Rao", "Cardiologist", 1, "10 years", "10:00 AM - 4:00 PM", "MBBS, MD Cardiology", 800, "1612349317150-e413f6a5b16d"),
    (2, "Dr. Nisha Menon", "Neurologist", 1, "8 years", "12:00 PM - 6:00 PM", "MBBS, DM Neurology", 900, "1559839734-2b71ea197ec2"),
    (3, "Dr. Rajesh Kumar", "Orthopedic Surgeon", 2, "12 years", "9:00 AM - 3:00 PM", "MBBS, MS Orthopedics", 750, "1582750433449-648ed127bb54"),
    (4, "Dr. Priya Sharma", "General Physician", 2, "6 years", "11:00 AM - 5:00 PM", "MBBS, MD Internal Medicine", 600, "1594824919122-da89af8ca6fc"),
    (5, "Dr. Suresh Reddy", "Pediatrician", 3, "15 years", "8:00 AM - 2:00 PM", "MBBS, MD Pediatrics", 700, "1537368910025-700350fe46c7"),
    (6, "Dr. Kavitha Iyer", "Gynecologist", 3, "9 years", "10:00 AM - 4:00 PM", "MBBS, MD Obstetrics & Gynecology", 850, "1651008376811-b90baee60c1f"),
    (7, "Dr. Vikram Singh", "Emergency Medicine", 4, "7 years", "24/7 Available", "MBBS, MD Emergency Medicine", 1000, "1638202993928-7267aad84c31"),
    (8, "Dr. Ravi Gupta", "General Surgeon", 4, "11 years", "2:00 PM - 8:00 PM", "MBBS, MS General Surgery", 900, "1622253692010-333f2da6031d"),
]

DOCTORS: list[dict] = [
    {
        "id": id_,
        "name": name,
        "specialization": spec,
        "hospitalId": hospital_id,
        "experience": experience,
        "timing": timing,
        "qualification": qualification,
        "consultationFee": fee,
        "image": _FACE.format(photo),
    }
    for id_, name, spec, hospital_id, experience, timing, qualification, fee, photo in _DOCTORS
]

_HOSPITALS = [
    (1, "Manipal Hospital Vijayawada", "Cardiology, Neurology", "NH-5, Tadepalli, Vijayawada, Andhra Pradesh", 4.8, 12500,
     "1519494026892-80bbd2d6fd0d", "Leading healthcare provider with state-of-the-art facilities and experienced medical professionals."),
    (2, "Ramesh Hospitals", "Orthopedics, General Medicine", "Governorpet, Vijayawada, Andhra Pradesh", 4.6, 8900,
     "1586773860418-d37222d8fce3", "Comprehensive healthcare services with focus on orthopedic care and general medicine."),
    (3, "Andhra Hospital", "Pediatrics, Gynecology", "Suryaraopet, Vijayawada, Andhra Pradesh", 4.7, 11200,
     "1551190822-a9333d879b1f", "Specialized care for women and children with modern medical equipment."),
    (4, "Vijaya Hospital", "Emergency Care, Surgery", "Benz Circle, Vijayawada, Andhra Pradesh", 4.5, 9800,
     "1538108149393-fbbd81895907", "24/7 emergency services with expert surgical team and critical care units."),
    (5, "Apollo Hospitals Vijayawada", "Oncology, Cardiology", "PWD Colony, Vijayawada, Andhra Pradesh", 4.9, 15600,
     "1587351021759-3e566b6af7cc", "Premier cancer care and cardiac treatment center with international standards."),
]

HOSPITALS: list[dict] = [
    {
        "id": id_,
        "name": name,
        "specialization": spec,
        "address": address,
        "rating": rating,
        "visitorsCount": visitors,
        "image": _IMG.format(photo),
        "description": description,
    }
    for id_, name, spec, address, rating, visitors, photo, description in _HOSPITALS
]


# =========================
# Diagnostica
# =========================
DIAGNOSTIC_CENTRES: list[dict] = [
    {
        "id": 1,
        "name": "Rapha Diagnostics",
        "specialization": "Radiology, Pathology",
        "address": "Hyderabad, Telangana",
        "rating": 4.7,
        "contact": "9876543210",
        "description": "Advanced diagnostic center with state-of-the-art equipment for accurate medical testing and imaging services.",
        "image": _IMG.format("1576091160399-112ba8d25d1f"),
    },
    {
        "id": 2,
        "name": "Grace Labs",
        "specialization": "Blood Tests, Scans",
        "address": "Chennai, Tamil Nadu",
        "rating": 4.5,
        "contact": "9123456789",
        "description": "Comprehensive laboratory services with quick turnaround times and precise test results.",
        "image": _IMG.format("1559757148-5c350d0d3c56"),
    },
    {
        "id": 3,
        "name": "Hope Diagnostic Center",
        "specialization": "Cardiology, Neurology Tests",
        "address": "Bangalore, Karnataka",
        "rating": 4.8,
        "contact": "9998887776",
        "description": "Specialized in cardiac and neurological diagnostic procedures with expert technicians.",
        "image": _IMG.format("1551601651-2a8555f1a136"),
    },
    {
        "id": 4,
        "name": "Mercy Medical Labs",
        "specialization": "General Pathology, Microbiology",
        "address": "Mumbai, Maharashtra",
        "rating": 4.6,
        "contact": "9876512345",
        "description": "Full-service laboratory with expertise in pathology and microbiological testing.",
        "image": _IMG.format("1582750433449-648ed127bb54"),
    },
]

_TESTS = [
    # id, nome, categoria, prezzo, durata, descrizione, preparazione, foto
    (1, "Complete Blood Count (CBC)", "Pathology", "₹400", "30 mins", "Comprehensive blood analysis to check for various disorders", "12-hour fasting required", "1559757148-5c350d0d3c56"),
    (2, "Chest X-Ray", "Radiology", "₹800", "15 mins", "Imaging test to examine chest, lungs, and heart", "Remove metal objects", "1576091160550-2173dba999ef"),
    (3, "ECG (Electrocardiogram)", "Cardiology", "₹600", "20 mins", "Test to check heart rhythm and electrical activity", "No special preparation needed", "1582750433449-648ed127bb54"),
    (4, "Lipid Profile", "Pathology", "₹900", "45 mins", "Blood test to check cholesterol and triglyceride levels", "12-hour fasting required", "1587351021759-3e566b6af7cc"),
    (5, "Ultrasound Abdomen", "Radiology", "₹1200", "30 mins", "Imaging test to examine abdominal organs", "8-hour fasting, full bladder", "1538108149393-fbbd81895907"),
    (6, "Thyroid Function Test", "Pathology", "₹700", "30 mins", "Blood test to check thyroid hormone levels", "No special preparation needed", "1551190822-a9333d879b1f"),
    (7, "MRI Scan", "Radiology", "₹5000", "60 mins", "Detailed imaging using magnetic resonance", "Remove all metal objects, inform about implants", "1519494026892-80bbd2d6fd0d"),
    (8, "Blood Sugar (Fasting)", "Pathology", "₹300", "15 mins", "Test to check blood glucose levels", "12-hour fasting required", "1586773860418-d37222d8fce3"),
    (9, "CT Scan Brain", "Radiology", "₹3500", "45 mins", "Detailed brain imaging using computed tomography", "Remove metal objects, contrast may be used", "1576091160550-2173dba999ef"),
    (10, "Liver Function Test", "Pathology", "₹800", "30 mins", "Blood test to check liver health and function", "12-hour fasting recommended", "1551601651-2a8555f1a136"),
    (11, "Kidney Function Test", "Pathology", "₹650", "30 mins", "Blood and urine tests to assess kidney function", "No special preparation needed", "1559757148-5c350d0d3c56"),
    (12, "Bone Density Scan", "Radiology", "₹2200", "30 mins", "DEXA scan to measure bone mineral density", "Avoid calcium supplements 24 hours before", "1576091160399-112ba8d25d1f"),
    (13, "Echocardiogram", "Cardiology", "₹2500", "45 mins", "Ultrasound of the heart to check structure and function", "No special preparation needed", "1582750433449-648ed127bb54"),
    (14, "HbA1c Test", "Pathology", "₹500", "20 mins", "Blood test for 3-month average blood sugar levels", "No fasting required", "1587351021759-3e566b6af7cc"),
    (15, "Mammography", "Radiology", "₹1800", "30 mins", "X-ray examination of the breast", "Schedule after menstrual period", "1538108149393-fbbd81895907"),
    (16, "Stress Test", "Cardiology", "₹3000", "90 mins", "Exercise stress test to evaluate heart function", "Wear comfortable clothing and shoes", "1519494026892-80bbd2d6fd0d"),
    (17, "Colonoscopy", "Gastroenterology", "₹4500", "60 mins", "Examination of the large intestine using a flexible tube", "Bowel preparation required 24 hours before", "1576091160550-2173dba999ef"),
    (18, "PSA Test", "Pathology", "₹600", "20 mins", "Prostate-specific antigen test for prostate health", "No ejaculation 48 hours before test", "1586773860418-d37222d8fce3"),
    (19, "Vitamin B12 Test", "Pathology", "₹450", "25 mins", "Blood test to check vitamin B12 levels", "No special preparation needed", "1551190822-a9333d879b1f"),
    (20, "Pulmonary Function Test", "Respiratory", "₹1500", "45 mins", "Tests to measure lung capacity and function", "Avoid bronchodilators before test", "1551601651-2a8555f1a136"),
]

DIAGNOSTIC_TESTS: list[dict] = [
    {
        "id": id_,
        "name": name,
        "category": category,
        "price": price,
        "duration": duration,
        "description": description,
        "requirements": requirements,
        "image": _IMG.format(photo),
    }
    for id_, name, category, price, duration, description, requirements, photo in _TESTS
]


# =========================
# Farmacie e farmaci
# =========================
PHARMACIES: list[dict] = [
    {
        "id": 1,
        "name": "Rapha Medicals",
        "address": "Hyderabad, Telangana",
        "contact": "9876543210",
        "rating": 4.8,
        "description": "Trusted pharmacy with a wide range of medicines and healthcare products.",
        "license": "DL-HYD-2024-001",
        "operatingHours": "8:00 AM - 10:00 PM",
        "image": _IMG.format("1631549916768-4119b2e5f926"),
    },
    {
        "id": 2,
        "name": "CarePlus Pharmacy",
        "address": "Chennai, Tamil Nadu",
        "contact": "9123456789",
        "rating": 4.6,
        "description": "24/7 pharmacy service with home delivery and online ordering.",
        "license": "DL-CHN-2024-002",
        "operatingHours": "24 Hours",
        "image": _IMG.format("1576602976047-174e57a47881"),
    },
    {
        "id": 3,
        "name": "WellCare Drugstore",
        "address": "Bangalore, Karnataka",
        "contact": "9998887776",
        "rating": 4.7,
        "description": "Modern pharmacy with expert pharmacists and quality medicines.",
        "license": "DL-BLR-2024-003",
        "operatingHours": "7:00 AM - 11:00 PM",
        "image": _IMG.format("1585435557343-3b092031133c"),
    },
    {
        "id": 4,
        "name": "HealthFirst Pharmacy",
        "address": "Mumbai, Maharashtra",
        "contact": "9876512345",
        "rating": 4.5,
        "description": "Community pharmacy focused on patient care and medication counseling.",
        "license": "DL-MUM-2024-004",
        "operatingHours": "8:00 AM - 9:00 PM",
        "image": _IMG.format("1566576912321-d58ddd7a6088"),
    },
]

_MEDICINE_PHOTOS = {
    1: "1584017911766-d451b3d0e843",
    2: "1576602976047-174e57a47881",
    3: "1471864190281-a93a3070b6de",
    5: "1576602976047-174e57a47881",
    6: "1563213126-a4273aed2016",
    7: "1584308666744-24d5c474f2ae",
    8: "1587854692152-cbe660dbde88",
    10: "1628771065518-0d82f1938462",
    11: "1584308666744-24d5c474f2ae",
    12: "1584017911766-d451b3d0e843",
    15: "1631549916768-4119b2e5f926",
    16: "1576602976047-174e57a47881",
    18: "1559757148-5c350d0d3c56",
    19: "1584017911766-d451b3d0e843",
    20: "1576602976047-174e57a47881",
}

_MEDICINES = [
    # id, nome, categoria, prezzo, scorta, descrizione, produttore, scadenza, ricetta, posologia, foto
    (1, "Paracetamol 500mg", "Pain Relief", "₹25", 120, "Effective pain reliever and fever reducer", "Sun Pharma", "Dec 2026", False, "1-2 tablets every 6-8 hours", 1),
    (2, "Amoxicillin 250mg", "Antibiotic", "₹40", 80, "Broad-spectrum antibiotic for bacterial infections", "Cipla", "Mar 2026", True, "1 capsule 3 times daily", 2),
    (3, "Cetirizine 10mg", "Antihistamine", "₹15", 200, "Antihistamine for allergy relief", "Dr. Reddy's", "Aug 2026", False, "1 tablet once daily", 3),
    (4, "Omeprazole 20mg", "Gastric", "₹35", 95, "Proton pump inhibitor for acid reflux", "Lupin", "Jan 2027", True, "1 capsule before breakfast", 1),
    (5, "Vitamin D3 1000 IU", "Vitamins", "₹60", 150, "Essential vitamin for bone health", "Abbott", "Oct 2026", False, "1 tablet daily with food", 5),
    (6, "Metformin 500mg", "Diabetes", "₹30", 75, "Diabetes medication to control blood sugar", "Glenmark", "Jun 2026", True, "1 tablet twice daily with meals", 6),
    (7, "Amlodipine 5mg", "Hypertension", "₹45", 110, "Calcium channel blocker for high blood pressure", "Torrent", "Sep 2026", True, "1 tablet once daily", 7),
    (8, "Ibuprofen 400mg", "Pain Relief", "₹20", 180, "Anti-inflammatory pain reliever", "Mankind", "May 2026", False, "1 tablet 3 times daily after meals", 8),
    (9, "Loratadine 10mg", "Antihistamine", "₹18", 160, "Non-drowsy antihistamine for allergies", "Zydus", "Nov 2026", False, "1 tablet once daily", 7),
    (10, "Atorvastatin 20mg", "Cholesterol", "₹55", 65, "Statin medication to lower cholesterol", "Ranbaxy", "Feb 2027", True, "1 tablet once daily at bedtime", 10),
    (11, "Aspirin 75mg", "Pain Relief", "₹12", 220, "Low-dose aspirin for cardiovascular protection", "Bayer", "Jul 2026", False, "1 tablet once daily with food", 11),
    (12, "Losartan 50mg", "Hypertension", "₹38", 85, "ARB medication for high blood pressure", "Teva", "Apr 2026", True, "1 tablet once daily", 12),
    (13, "Calcium Carbonate 500mg", "Vitamins", "₹22", 190, "Calcium supplement for bone health", "USV", "Dec 2026", False, "1-2 tablets daily with meals", 2),
    (14, "Azithromycin 250mg", "Antibiotic", "₹65", 45, "Macrolide antibiotic for respiratory infections", "Pfizer", "Jan 2026", True, "1 tablet once daily for 3 days", 1),
    (15, "Salbutamol Inhaler", "Respiratory", "₹120", 60, "Bronchodilator for asthma and COPD", "GSK", "Sep 2026", True, "2 puffs as needed", 15),
    (16, "Multivitamin Tablets", "Vitamins", "₹45", 140, "Complete multivitamin and mineral supplement", "Centrum", "Nov 2026", False, "1 tablet daily with breakfast", 16),
    (17, "Diclofenac Gel", "Pain Relief", "₹35", 90, "Topical anti-inflammatory gel for joint pain", "Voltaren", "Aug 2026", False, "Apply 3-4 times daily to affected area", 15),
    (18, "Insulin Glargine", "Diabetes", "₹450", 25, "Long-acting insulin for diabetes management", "Sanofi", "May 2026", True, "As prescribed by doctor", 18),
    (19, "Probiotic Capsules", "Digestive", "₹280", 70, "Probiotic supplement for digestive health", "Yakult", "Oct 2026", False, "1 capsule daily with water", 19),
    (20, "Antihistamine Syrup", "Antihistamine", "₹85", 105, "Liquid antihistamine for children and adults", "Himalaya", "Mar 2027", False, "5-10ml twice daily or as directed", 20),
]

MEDICINES: list[dict] = [
    {
        "id": id_,
        "name": name,
        "category": category,
        "price": price,
        "stock": stock,
        "description": description,
        "manufacturer": manufacturer,
        "expiryDate": expiry,
        "prescription": prescription,
        "dosage": dosage,
        "image": _IMG.format(_MEDICINE_PHOTOS.get(photo, _MEDICINE_PHOTOS[1])),
    }
    for id_, name, category, price, stock, description, manufacturer, expiry, prescription, dosage, photo in _MEDICINES
]


# =========================
# Prenotazioni visite
# =========================
INITIAL_BOOKINGS: list[dict] = [
    {
        "id": 1,
        "patientName": "Mithin Chandu",
        "patientAge": 28,
        "patientGender": "Male",
        "doctorId": 1,
        "doctorName": "Dr. Arjun Rao",
        "hospitalId": 1,
        "hospitalName": "Rapha Multi-Speciality Hospital",
        "date": "2025-11-05",
        "time": "10:30 AM",
        "symptoms": "Chest pain and breathing difficulty",
        "status": "Pending",
        "bookedAt": "2025-10-31T10:00:00Z",
    },
    {
        "id": 2,
        "patientName": "Priya Reddy",
        "patientAge": 32,
        "patientGender": "Female",
        "doctorId": 2,
        "doctorName": "Dr. Nisha Menon",
        "hospitalId": 1,
        "hospitalName": "Rapha Multi-Speciality Hospital",
        "date": "2025-11-06",
        "time": "2:00 PM",
        "symptoms": "Frequent headaches and dizziness",
        "status": "Accepted",
        "bookedAt": "2025-10-30T14:30:00Z",
    },
    {
        "id": 3,
        "patientName": "Arun Kumar",
        "patientAge": 45,
        "patientGender": "Male",
        "doctorId": 3,
        "doctorName": "Dr. Rajesh Kumar",
        "hospitalId": 2,
        "hospitalName": "Grace Health Care",
        "date": "2025-11-04",
        "time": "11:00 AM",
        "symptoms": "Lower back pain",
        "status": "Completed",
        "bookedAt": "2025-10-29T09:15:00Z",
    },
    {
        "id": 4,
        "patientName": "Lakshmi Devi",
        "patientAge": 38,
        "patientGender": "Female",
        "doctorId": 4,
        "doctorName": "Dr. Priya Sharma",
        "hospitalId": 2,
        "hospitalName": "Grace Health Care",
        "date": "2025-11-07",
        "time": "3:30 PM",
        "symptoms": "Fever and body ache",
        "status": "Pending",
        "bookedAt": "2025-10-31T08:45:00Z",
    },
]


# =========================
# Prenotazioni esami
# =========================
_DIAGNOSTIC_BOOKINGS = [
    # id, paziente, età, sesso, telefono, test, centro, data, ora, stato, booked_at, note, risultati
    (1, "Mithin Kumar", 28, "Male", "9876543210", 1, 1, "2025-11-02", "10:00 AM", "Pending", "2025-10-30T14:30:00Z",
     "Patient has been feeling weak lately", None),
    (2, "Rahul Sharma", 35, "Male", "9123456789", 2, 1, "2025-11-01", "2:00 PM", "Accepted", "2025-10-29T16:45:00Z",
     "Persistent cough for 2 weeks", None),
    (3, "Priya Patel", 29, "Female", "9998887776", 4, 2, "2025-10-31", "9:00 AM", "Sample Collected", "2025-10-28T10:20:00Z",
     "Family history of heart disease", None),
    (4, "Anita Singh", 42, "Female", "9876512345", 6, 1, "2025-10-30", "11:30 AM", "Completed", "2025-10-27T09:15:00Z",
     "Symptoms of hypothyroidism",
     "TSH: 8.5 mIU/L (Elevated), T3: 2.1 ng/dL (Normal), T4: 6.8 μg/dL (Low)"),
    (5, "David Wilson", 55, "Male", "9111222333", 3, 3, "2025-11-03", "3:30 PM", "Pending", "2025-10-31T11:00:00Z",
     "Chest pain and irregular heartbeat", None),
    (6, "Sarah Johnson", 33, "Female", "9444555666", 5, 2, "2025-11-01", "4:00 PM", "Results Ready", "2025-10-29T13:45:00Z",
     "Abdominal pain and bloating", "Normal liver, spleen, and kidneys. No abnormalities detected."),
    (7, "Ravi Krishnan", 60, "Male", "9777888999", 8, 4, "2025-11-02", "8:00 AM", "Accepted", "2025-10-30T17:30:00Z",
     "Diabetes screening - family history", None),
    (8, "Lisa Chen", 26, "Female", "9555666777", 7, 3, "2025-11-04", "11:00 AM", "Pending", "2025-10-31T08:20:00Z",
     "Suspected herniated disc - lower back pain", None),
]

_TESTS_BY_ID = {t["id"]: t for t in DIAGNOSTIC_TESTS}
_CENTRES_BY_ID = {c["id"]: c for c in DIAGNOSTIC_CENTRES}

INITIAL_DIAGNOSTIC_BOOKINGS: list[dict] = []
for (id_, patient, age, gender, phone, test_id, centre_id, day, hour, status, booked_at, notes,
     results) in _DIAGNOSTIC_BOOKINGS:
    booking = {
        "id": id_,
        "patientName": patient,
        "patientAge": age,
        "patientGender": gender,
        "patientPhone": phone,
        "testName": _TESTS_BY_ID[test_id]["name"],
        "testId": test_id,
        "diagnosticId": centre_id,
        "diagnosticName": _CENTRES_BY_ID[centre_id]["name"],
        "date": day,
        "time": hour,
        "status": status,
        "price": _TESTS_BY_ID[test_id]["price"],
        "bookedAt": booked_at,
        "notes": notes,
    }
    if results:
        booking["results"] = results
    INITIAL_DIAGNOSTIC_BOOKINGS.append(booking)


# =========================
# Ordini farmacia
# =========================
def _item(medicine_id: int, name: str, quantity: int, price: str, subtotal: str, category: str) -> dict:
    return {
        "medicineId": medicine_id,
        "medicineName": name,
        "quantity": quantity,
        "price": price,
        "subtotal": subtotal,
        "category": category,
    }


INITIAL_PHARMACY_ORDERS: list[dict] = [
    {
        "id": 1,
        "patientName": "Mithin Kumar",
        "patientAge": 28,
        "patientGender": "Male",
        "patientPhone": "9876543210",
        "patientAddress": "123 MG Road, Hyderabad",
        "items": [_item(1, "Paracetamol 500mg", 2, "₹25", "₹50", "Pain Relief")],
        "totalAmount": "₹50",
        "pharmacyId": 1,
        "pharmacyName": "Rapha Medicals",
        "status": "Pending",
        "orderDate": "2025-11-01",
        "orderTime": "2:30 PM",
        "deliveryType": "Home Delivery",
        "notes": "Please deliver after 6 PM",
        "estimatedDelivery": "2025-11-01 8:00 PM",
        "orderedAt": "2025-11-01T14:30:00Z",
    },
    {
        "id": 2,
        "patientName": "John Smith",
        "patientAge": 45,
        "patientGender": "Male",
        "patientPhone": "9123456789",
        "patientAddress": "456 Park Street, Chennai",
        "items": [_item(2, "Amoxicillin 250mg", 1, "₹40", "₹40", "Antibiotic")],
        "totalAmount": "₹40",
        "pharmacyId": 2,
        "pharmacyName": "CarePlus Pharmacy",
        "status": "Accepted",
        "orderDate": "2025-10-31",
        "orderTime": "11:15 AM",
        "deliveryType": "Pickup",
        "prescriptionUrl": "https://example.com/prescription1.pdf",
        "notes": "Prescription medicine - verified",
        "orderedAt": "2025-10-31T11:15:00Z",
    },
    {
        "id": 3,
        "patientName": "Priya Patel",
        "patientAge": 32,
        "patientGender": "Female",
        "patientPhone": "9998887776",
        "patientAddress": "789 Brigade Road, Bangalore",
        "items": [
            _item(3, "Cetirizine 10mg", 1, "₹15", "₹15", "Antihistamine"),
            _item(5, "Vitamin D3 1000 IU", 1, "₹60", "₹60", "Vitamins"),
        ],
        "totalAmount": "₹75",
        "pharmacyId": 3,
        "pharmacyName": "WellCare Drugstore",
        "status": "Preparing",
        "orderDate": "2025-11-01",
        "orderTime": "9:45 AM",
        "deliveryType": "Pickup",
        "notes": "Allergy medication needed urgently",
        "orderedAt": "2025-11-01T09:45:00Z",
    },
    {
        "id": 4,
        "patientName": "Rajesh Kumar",
        "patientAge": 55,
        "patientGender": "Male",
        "patientPhone": "9876512345",
        "patientAddress": "321 Marine Drive, Mumbai",
        "items": [
            _item(6, "Metformin 500mg", 2, "₹30", "₹60", "Diabetes"),
            _item(7, "Amlodipine 5mg", 1, "₹45", "₹45", "Hypertension"),
        ],
        "totalAmount": "₹105",
        "pharmacyId": 4,
        "pharmacyName": "HealthFirst Pharmacy",
        "status": "Ready for Pickup",
        "orderDate": "2025-10-30",
        "orderTime": "4:20 PM",
        "deliveryType": "Pickup",
        "prescriptionUrl": "https://example.com/prescription2.pdf",
        "notes": "Regular monthly medication refill",
        "orderedAt": "2025-10-30T16:20:00Z",
    },
    {
        "id": 5,
        "patientName": "Anita Singh",
        "patientAge": 38,
        "patientGender": "Female",
        "patientPhone": "9111222333",
        "patientAddress": "654 Sector 15, Gurgaon",
        "items": [_item(4, "Omeprazole 20mg", 1, "₹35", "₹35", "Gastric")],
        "totalAmount": "₹35",
        "pharmacyId": 1,
        "pharmacyName": "Rapha Medicals",
        "status": "Delivered",
        "orderDate": "2025-10-29",
        "orderTime": "1:10 PM",
        "deliveryType": "Home Delivery",
        "prescriptionUrl": "https://example.com/prescription3.pdf",
        "notes": "Delivered successfully",
        "estimatedDelivery": "2025-10-29 6:00 PM",
        "orderedAt": "2025-10-29T13:10:00Z",
    },
    {
        "id": 6,
        "patientName": "David Wilson",
        "patientAge": 42,
        "patientGender": "Male",
        "patientPhone": "9444555666",
        "patientAddress": "987 Civil Lines, Delhi",
        "items": [
            _item(8, "Ibuprofen 400mg", 1, "₹20", "₹20", "Pain Relief"),
            _item(9, "Loratadine 10mg", 1, "₹18", "₹18", "Antihistamine"),
        ],
        "totalAmount": "₹38",
        "pharmacyId": 2,
        "pharmacyName": "CarePlus Pharmacy",
        "status": "Accepted",
        "orderDate": "2025-11-01",
        "orderTime": "3:45 PM",
        "deliveryType": "Home Delivery",
        "notes": "Please call before delivery",
        "estimatedDelivery": "2025-11-01 7:00 PM",
        "orderedAt": "2025-11-01T15:45:00Z",
    },
    {
        "id": 7,
        "patientName": "Sarah Johnson",
        "patientAge": 29,
        "patientGender": "Female",
        "patientPhone": "9777888999",
        "patientAddress": "246 Lake View, Pune",
        "items": [_item(10, "Atorvastatin 20mg", 1, "₹55", "₹55", "Cholesterol")],
        "totalAmount": "₹55",
        "pharmacyId": 3,
        "pharmacyName": "WellCare Drugstore",
        "status": "Pending",
        "orderDate": "2025-11-01",
        "orderTime": "5:30 PM",
        "deliveryType": "Pickup",
        "prescriptionUrl": "https://example.com/prescription4.pdf",
        "notes": "Cholesterol medication - prescription required",
        "orderedAt": "2025-11-01T17:30:00Z",
    },
    {
        "id": 8,
        "patientName": "Ravi Krishnan",
        "patientAge": 50,
        "patientGender": "Male",
        "patientPhone": "9555666777",
        "patientAddress": "135 Anna Salai, Chennai",
        "items": [
            _item(1, "Paracetamol 500mg", 3, "₹25", "₹75", "Pain Relief"),
            _item(3, "Cetirizine 10mg", 2, "₹15", "₹30", "Antihistamine"),
        ],
        "totalAmount": "₹105",
        "pharmacyId": 2,
        "pharmacyName": "CarePlus Pharmacy",
        "status": "Delivered",
        "orderDate": "2025-10-28",
        "orderTime": "12:00 PM",
        "deliveryType": "Home Delivery",
        "notes": "Family pack order - delivered on time",
        "estimatedDelivery": "2025-10-28 5:00 PM",
        "orderedAt": "2025-10-28T12:00:00Z",
    },
]


# =========================
# Cartelle cliniche (EHR)
# =========================
def _rx(id_: str, name: str, dosage: str, frequency: str, duration: str, instructions: str) -> dict:
    return {
        "id": id_,
        "medicineName": name,
        "dosage": dosage,
        "frequency": frequency,
        "duration": duration,
        "instructions": instructions,
    }


def _report(id_: str, test: str, day: str, results: str, status: str, normal_range: str | None = None) -> dict:
    report = {"id": id_, "testName": test, "reportDate": day, "results": results, "status": status}
    if normal_range:
        report["normalRange"] = normal_range
    return report


def _follow_up(id_: str, when: str, purpose: str, instructions: str, priority: str) -> dict:
    return {
        "id": id_,
        "nextAppointmentDate": when,
        "purpose": purpose,
        "instructions": instructions,
        "priority": priority,
    }


def _vitals(sugar: int, systolic: int, diastolic: int, weight: int, height: int, temperature: float, heart_rate: int) -> dict:
    return {
        "sugarReading": sugar,
        "bloodPressure": {"systolic": systolic, "diastolic": diastolic},
        "weight": weight,
        "height": height,
        "temperature": temperature,
        "heartRate": heart_rate,
    }


EHR_RECORDS: list[dict] = [
    {
        "id": "ehr_001",
        "raphaId": "RAPHA_2024_001_MC",
        "appointmentDateTime": "2024-11-08T10:00:00Z",
        "patientFullName": "Mithin Chandu",
        "patientBasicVitals": _vitals(95, 120, 80, 70, 175, 98.6, 72),
        "healthIssue": "Persistent headaches and mild hypertension symptoms",
        "doctorResolution": "Prescribed medication for blood pressure management and recommended lifestyle changes "
                            "including regular exercise and reduced sodium intake.",
        "medicinesPrescription": [
            _rx("med_001", "Amlodipine", "5mg", "Once daily", "30 days", "Take with food in the morning"),
            _rx("med_002", "Paracetamol", "500mg", "As needed", "5 days", "For headache relief, maximum 3 tablets per day"),
        ],
        "diagnosticReports": [
            _report("diag_001", "Blood Pressure Monitoring", "2024-11-08", "140/90 mmHg", "Abnormal", "120/80 mmHg"),
            _report("diag_002", "Complete Blood Count", "2024-11-08", "All parameters within normal limits", "Normal",
                    "Standard CBC ranges"),
        ],
        "doctorRemarkOnDiagnostics": "Blood pressure is slightly elevated. CBC results are normal. "
                                     "Recommend continuous monitoring and medication adherence.",
        "followUpDetails": [
            _follow_up("follow_001", "2024-11-22T10:00:00Z", "Blood pressure follow-up and medication review",
                       "Continue prescribed medication and maintain blood pressure log", "Medium"),
        ],
        "finalRemarks": "Patient shows mild hypertension. Started on Amlodipine with good tolerance. Advised lifestyle "
                        "modifications. Follow-up in 2 weeks to assess treatment response.",
        "doctorId": "doc_001",
        "doctorName": "Dr. Sarah Johnson",
        "createdAt": "2024-11-08T10:30:00Z",
        "updatedAt": "2024-11-08T10:30:00Z",
        "status": "Follow-up Required",
    },
    {
        "id": "ehr_002",
        "raphaId": "RAPHA_2024_002_AS",
        "appointmentDateTime": "2024-11-07T14:30:00Z",
        "patientFullName": "Anita Sharma",
        "patientBasicVitals": _vitals(180, 130, 85, 65, 160, 98.4, 78),
        "healthIssue": "Type 2 Diabetes management and routine checkup",
        "doctorResolution": "Adjusted diabetes medication dosage and provided dietary counseling. Recommended regular "
                            "glucose monitoring and exercise routine.",
        "medicinesPrescription": [
            _rx("med_003", "Metformin", "500mg", "Twice daily", "90 days", "Take with meals, morning and evening"),
            _rx("med_004", "Glimepiride", "2mg", "Once daily", "90 days", "Take before breakfast"),
        ],
        "diagnosticReports": [
            _report("diag_003", "HbA1c", "2024-11-07", "8.2%", "Abnormal", "< 7%"),
            _report("diag_004", "Fasting Blood Glucose", "2024-11-07", "165 mg/dL", "Abnormal", "70-100 mg/dL"),
            _report("diag_005", "Lipid Profile", "2024-11-07",
                    "Total Cholesterol: 220 mg/dL, LDL: 140 mg/dL, HDL: 45 mg/dL", "Abnormal",
                    "Total < 200, LDL < 100, HDL > 50"),
        ],
        "doctorRemarkOnDiagnostics": "HbA1c indicates suboptimal diabetes control. Lipid levels are elevated. "
                                     "Increased medication dosage and strict dietary adherence recommended.",
        "followUpDetails": [
            _follow_up("follow_002", "2024-12-07T14:30:00Z", "Diabetes management review and HbA1c recheck",
                       "Monitor blood glucose daily, follow prescribed diet, and maintain exercise routine", "High"),
            _follow_up("follow_003", "2024-11-21T09:00:00Z", "Nutritionist consultation",
                       "Attend dietary counseling session", "Medium"),
        ],
        "finalRemarks": "Diabetes control needs improvement. Adjusted medication regimen and emphasized importance of "
                        "lifestyle modifications. Patient counseled on complications prevention.",
        "doctorId": "doc_002",
        "doctorName": "Dr. Rajesh Patel",
        "createdAt": "2024-11-07T15:00:00Z",
        "updatedAt": "2024-11-07T15:00:00Z",
        "status": "Follow-up Required",
    },
    {
        "id": "ehr_003",
        "raphaId": "RAPHA_2024_003_RK",
        "appointmentDateTime": "2024-11-06T11:15:00Z",
        "patientFullName": "Rohit Kumar",
        "patientBasicVitals": _vitals(88, 118, 75, 78, 180, 99.2, 85),
        "healthIssue": "Acute appendicitis requiring surgical intervention",
        "doctorResolution": "Emergency laparoscopic appendectomy performed successfully. Post-operative care and "
                            "recovery monitoring initiated.",
        "medicinesPrescription": [
            _rx("med_005", "Ceftriaxone", "1g", "Twice daily", "7 days",
                "IV administration, continue until infection markers normalize"),
            _rx("med_006", "Tramadol", "50mg", "Every 6 hours", "5 days", "For post-operative pain management"),
            _rx("med_007", "Omeprazole", "20mg", "Once daily", "14 days", "Take on empty stomach in the morning"),
        ],
        "diagnosticReports": [
            _report("diag_006", "CT Scan Abdomen", "2024-11-06",
                    "Acute appendicitis with mild inflammation, no perforation detected", "Abnormal"),
            _report("diag_007", "White Blood Cell Count", "2024-11-06", "15,000 cells/μL", "Abnormal",
                    "4,000-11,000 cells/μL"),
            _report("diag_008", "Post-Op X-Ray", "2024-11-06",
                    "No signs of complications, surgical site appears normal", "Normal"),
        ],
        "doctorRemarkOnDiagnostics": "Pre-operative CT confirmed acute appendicitis. Post-operative imaging shows "
                                     "successful procedure with no immediate complications.",
        "surgeryDescription": {
            "id": "surg_001",
            "surgeryType": "Laparoscopic Appendectomy",
            "description": "Minimally invasive removal of inflamed appendix using laparoscopic technique",
            "reasonForSurgery": "Acute appendicitis with risk of perforation and complications if left untreated",
            "scheduledDate": "2024-11-06T13:00:00Z",
            "completedDate": "2024-11-06T14:30:00Z",
            "status": "Completed",
            "postOpStatus": "Successful recovery, patient stable, minimal post-operative pain",
            "complications": "None observed",
        },
        "followUpDetails": [
            _follow_up("follow_004", "2024-11-13T10:00:00Z", "Post-operative wound check and suture removal",
                       "Keep surgical site clean and dry, avoid heavy lifting", "High"),
            _follow_up("follow_005", "2024-11-20T10:00:00Z", "Final post-operative assessment",
                       "Resume normal activities gradually", "Medium"),
        ],
        "finalRemarks": "Successful laparoscopic appendectomy with excellent post-operative recovery. Patient educated "
                        "on wound care and activity restrictions. Full recovery expected within 2-3 weeks.",
        "doctorId": "doc_003",
        "doctorName": "Dr. Michael Chen",
        "createdAt": "2024-11-06T15:00:00Z",
        "updatedAt": "2024-11-06T15:00:00Z",
        "status": "Follow-up Required",
    },
    {
        "id": "ehr_004",
        "raphaId": "RAPHA_2024_004_PS",
        "appointmentDateTime": "2024-11-05T09:00:00Z",
        "patientFullName": "Priya Singh",
        "patientBasicVitals": _vitals(92, 110, 70, 58, 165, 98.6, 68),
        "healthIssue": "Annual health checkup and preventive care consultation",
        "doctorResolution": "Complete health assessment shows excellent overall health. Recommended routine "
                            "preventive measures and lifestyle maintenance.",
        "medicinesPrescription": [
            _rx("med_008", "Multivitamin", "1 tablet", "Once daily", "365 days",
                "Take with breakfast for optimal absorption"),
            _rx("med_009", "Calcium + Vitamin D3", "500mg + 250 IU", "Once daily", "365 days", "Take with dinner"),
        ],
        "diagnosticReports": [
            _report("diag_009", "Complete Blood Count", "2024-11-05", "All parameters within normal limits", "Normal"),
            _report("diag_010", "Lipid Profile", "2024-11-05",
                    "Total Cholesterol: 160 mg/dL, LDL: 85 mg/dL, HDL: 65 mg/dL", "Normal",
                    "Total < 200, LDL < 100, HDL > 50"),
            _report("diag_011", "Thyroid Function Test", "2024-11-05", "TSH: 2.5 mIU/L, T3: 145 ng/dL, T4: 8.2 μg/dL",
                    "Normal", "TSH: 0.5-5.0, T3: 80-180, T4: 4.5-12.0"),
        ],
        "doctorRemarkOnDiagnostics": "All laboratory results are within normal ranges. Excellent metabolic and "
                                     "cardiovascular health indicators.",
        "followUpDetails": [
            _follow_up("follow_006", "2025-11-05T09:00:00Z", "Annual health checkup",
                       "Continue healthy lifestyle practices, regular exercise, and balanced diet", "Low"),
        ],
        "finalRemarks": "Excellent health status with all parameters normal. Commended patient on maintaining healthy "
                        "lifestyle. Continue current health practices and return for annual checkup.",
        "doctorId": "doc_001",
        "doctorName": "Dr. Sarah Johnson",
        "createdAt": "2024-11-05T10:00:00Z",
        "updatedAt": "2024-11-05T10:00:00Z",
        "status": "Completed",
    },
    {
        "id": "ehr_005",
        "raphaId": "RAPHA_2024_005_VG",
        "appointmentDateTime": "2024-11-04T16:00:00Z",
        "patientFullName": "Vikram Gupta",
        "patientBasicVitals": _vitals(105, 145, 95, 85, 175, 98.8, 88),
        "healthIssue": "Chronic knee pain and mobility issues, suspected osteoarthritis",
        "doctorResolution": "Diagnosed with moderate osteoarthritis. Initiated pain management protocol and "
                            "physiotherapy referral. Considering joint injection if conservative treatment fails.",
        "medicinesPrescription": [
            _rx("med_010", "Ibuprofen", "400mg", "Three times daily", "21 days",
                "Take with food to prevent gastric irritation"),
            _rx("med_011", "Glucosamine Sulfate", "1500mg", "Once daily", "90 days", "Take with meals"),
            _rx("med_012", "Topical Diclofenac Gel", "Apply thin layer", "Twice daily", "30 days",
                "Apply to affected knee area, wash hands after application"),
        ],
        "diagnosticReports": [
            _report("diag_012", "X-Ray Knee (Both Knees)", "2024-11-04",
                    "Moderate joint space narrowing and osteophyte formation in both knees, consistent with "
                    "osteoarthritis", "Abnormal"),
            _report("diag_013", "ESR & CRP", "2024-11-04", "ESR: 25 mm/hr, CRP: 2.1 mg/L", "Normal",
                    "ESR: < 20 mm/hr, CRP: < 3.0 mg/L"),
        ],
        "doctorRemarkOnDiagnostics": "X-ray confirms moderate bilateral knee osteoarthritis. Inflammatory markers are "
                                     "within normal limits, ruling out inflammatory arthritis.",
        "followUpDetails": [
            _follow_up("follow_007", "2024-11-18T16:00:00Z", "Pain management review and physiotherapy assessment",
                       "Start physiotherapy sessions, continue medications as prescribed", "Medium"),
            _follow_up("follow_008", "2024-12-04T16:00:00Z",
                       "Consider intra-articular injection if conservative treatment inadequate",
                       "Monitor pain levels and functional improvement", "Medium"),
        ],
        "finalRemarks": "Moderate osteoarthritis confirmed. Started comprehensive conservative management including "
                        "NSAIDs, supplements, and physiotherapy. Patient counseled on weight management and exercise "
                        "modifications.",
        "doctorId": "doc_004",
        "doctorName": "Dr. Lisa Williams",
        "createdAt": "2024-11-04T17:00:00Z",
        "updatedAt": "2024-11-04T17:00:00Z",
        "status": "Follow-up Required",
    },
]
