"""Embedded copy of the Australian cancer mortality dataset (CSV text)."""

EMBEDDED_CSV = """\
Year,Cancer label,Total,Crude rate,ASR (World),ASR (Australia)
2000,Bladder,643,3.36,2.17,3.08
2000,Bowel,4236,22.12,14.27,20.26
2000,Brain,1373,7.17,4.62,6.57
2000,Breast,1990,10.39,6.70,9.52
2000,Cervical,258,1.34,0.87,1.23
2000,Head and neck,705,3.68,2.37,3.37
2000,Kidney,700,3.65,2.36,3.35
2000,Leukaemia,1201,6.27,4.04,5.74
2000,Liver,934,4.88,3.15,4.47
2000,Lung,5932,30.97,19.98,28.38
2000,Melanoma of the skin,971,5.07,3.27,4.65
2000,Mesothelioma,465,2.43,1.57,2.23
2000,Non-Hodgkin lymphoma,1085,5.67,3.66,5.19
2000,Oesophageal,800,4.18,2.70,3.83
2000,Ovarian,669,3.49,2.25,3.20
2000,Pancreatic,1762,9.20,5.94,8.43
2000,Prostate,2547,13.30,8.58,12.18
2000,Stomach,837,4.37,2.82,4.00
2000,Uterine,338,1.76,1.14,1.62
2001,Bladder,656,3.37,2.15,3.06
2001,Bowel,4161,21.36,13.67,19.42
2001,Brain,1367,7.02,4.49,6.38
2001,Breast,1998,10.26,6.57,9.32
2001,Cervical,267,1.37,0.88,1.25
2001,Head and neck,749,3.85,2.46,3.50
2001,Kidney,726,3.73,2.39,3.39
2001,Leukaemia,1200,6.16,3.94,5.60
2001,Liver,954,4.90,3.14,4.45
2001,Lung,5878,30.18,19.32,27.43
2001,Melanoma of the skin,998,5.13,3.28,4.66
2001,Mesothelioma,499,2.56,1.64,2.33
2001,Non-Hodgkin lymphoma,1117,5.73,3.67,5.21
2001,Oesophageal,810,4.16,2.66,3.78
2001,Ovarian,655,3.36,2.15,3.06
2001,Pancreatic,1780,9.14,5.85,8.31
2001,Prostate,2583,13.26,8.49,12.05
2001,Stomach,863,4.43,2.84,4.03
2001,Uterine,352,1.81,1.16,1.64
2002,Bladder,651,3.28,2.09,2.96
2002,Bowel,4048,20.44,12.98,18.44
2002,Brain,1387,7.00,4.45,6.32
2002,Breast,2064,10.42,6.62,9.40
2002,Cervical,280,1.41,0.90,1.27
2002,Head and neck,783,3.95,2.51,3.56
2002,Kidney,733,3.70,2.35,3.34
2002,Leukaemia,1181,5.96,3.79,5.38
2002,Liver,987,4.98,3.17,4.50
2002,Lung,5996,30.27,19.23,27.31
2002,Melanoma of the skin,1044,5.27,3.35,4.76
2002,Mesothelioma,529,2.67,1.70,2.41
2002,Non-Hodgkin lymphoma,1118,5.65,3.59,5.09
2002,Oesophageal,802,4.05,2.57,3.65
2002,Ovarian,644,3.25,2.07,2.93
2002,Pancreatic,1847,9.33,5.92,8.41
2002,Prostate,2683,13.54,8.60,12.22
2002,Stomach,888,4.48,2.85,4.04
2002,Uterine,358,1.81,1.15,1.63
2003,Bladder,638,3.17,2.00,2.84
2003,Bowel,4003,19.88,12.53,17.80
2003,Brain,1449,7.19,4.54,6.44
2003,Breast,2161,10.73,6.76,9.61
2003,Cervical,289,1.43,0.90,1.28
2003,Head and neck,795,3.95,2.49,3.54
2003,Kidney,727,3.61,2.28,3.23
2003,Leukaemia,1172,5.82,3.67,5.21
2003,Liver,1048,5.20,3.28,4.66
2003,Lung,6242,30.99,19.54,27.75
2003,Melanoma of the skin,1085,5.39,3.40,4.82
2003,Mesothelioma,546,2.71,1.71,2.43
2003,Non-Hodgkin lymphoma,1093,5.43,3.42,4.86
2003,Oesophageal,795,3.95,2.49,3.53
2003,Ovarian,650,3.23,2.03,2.89
2003,Pancreatic,1963,9.75,6.15,8.73
2003,Prostate,2789,13.85,8.73,12.40
2003,Stomach,893,4.43,2.79,3.97
2003,Uterine,362,1.80,1.13,1.61
2004,Bladder,635,3.10,1.94,2.76
2004,Bowel,4080,19.93,12.47,17.71
2004,Brain,1535,7.50,4.69,6.67
2004,Breast,2234,10.92,6.83,9.70
2004,Cervical,289,1.41,0.88,1.26
2004,Head and neck,793,3.87,2.42,3.44
2004,Kidney,726,3.55,2.22,3.15
2004,Leukaemia,1197,5.85,3.66,5.20
2004,Liver,1133,5.54,3.46,4.92
2004,Lung,6469,31.60,19.78,28.08
2004,Melanoma of the skin,1097,5.36,3.35,4.76
2004,Mesothelioma,552,2.69,1.69,2.39
2004,Non-Hodgkin lymphoma,1065,5.20,3.25,4.62
2004,Oesophageal,807,3.94,2.47,3.50
2004,Ovarian,674,3.29,2.06,2.92
2004,Pancreatic,2091,10.22,6.39,9.08
2004,Prostate,2836,13.85,8.67,12.31
2004,Stomach,871,4.25,2.66,3.78
2004,Uterine,373,1.82,1.14,1.62
2005,Bladder,651,3.13,1.94,2.76
2005,Bowel,4240,20.38,12.66,17.98
2005,Brain,1611,7.75,4.81,6.83
2005,Breast,2246,10.80,6.71,9.52
2005,Cervical,284,1.36,0.85,1.20
2005,Head and neck,794,3.82,2.37,3.37
2005,Kidney,745,3.58,2.22,3.16
2005,Leukaemia,1253,6.02,3.74,5.31
2005,Liver,1220,5.87,3.64,5.17
2005,Lung,6535,31.42,19.52,27.71
2005,Melanoma of the skin,1080,5.19,3.23,4.58
2005,Mesothelioma,555,2.67,1.66,2.35
2005,Non-Hodgkin lymphoma,1061,5.10,3.17,4.50
2005,Oesophageal,843,4.05,2.52,3.57
2005,Ovarian,703,3.38,2.10,2.98
2005,Pancreatic,2185,10.50,6.52,9.26
2005,Prostate,2799,13.46,8.36,11.87
2005,Stomach,836,4.02,2.50,3.55
2005,Thyroid,129,0.62,0.39,0.55
2005,Uterine,394,1.89,1.18,1.67
2006,Bladder,682,3.23,1.99,2.82
2006,Bowel,4375,20.70,12.77,18.13
2006,Brain,1648,7.80,4.81,6.83
2006,Breast,2203,10.42,6.43,9.13
2006,Cervical,278,1.32,0.81,1.15
2006,Head and neck,815,3.86,2.38,3.38
2006,Kidney,783,3.71,2.29,3.25
2006,Leukaemia,1312,6.21,3.83,5.44
2006,Liver,1286,6.09,3.75,5.33
2006,Lung,6413,30.35,18.71,26.57
2006,Melanoma of the skin,1055,4.99,3.08,4.37
2006,Mesothelioma,569,2.69,1.66,2.36
2006,Non-Hodgkin lymphoma,1090,5.16,3.18,4.52
2006,Oesophageal,888,4.20,2.59,3.68
2006,Ovarian,721,3.41,2.10,2.99
2006,Pancreatic,2223,10.52,6.49,9.21
2006,Prostate,2717,12.86,7.93,11.26
2006,Stomach,813,3.85,2.37,3.37
2006,Thyroid,134,0.63,0.39,0.55
2006,Uterine,422,2.00,1.23,1.75
2007,Bladder,711,3.31,2.03,2.88
2007,Bowel,4389,20.45,12.52,17.77
2007,Brain,1645,7.67,4.69,6.66
2007,Breast,2154,10.03,6.14,8.72
2007,Cervical,280,1.30,0.80,1.13
2007,Head and neck,858,4.00,2.45,3.47
2007,Kidney,827,3.85,2.36,3.35
2007,Leukaemia,1345,6.27,3.83,5.44
2007,Liver,1324,6.17,3.78,5.36
2007,Lung,6218,28.98,17.73,25.18
2007,Melanoma of the skin,1049,4.89,2.99,4.25
2007,Mesothelioma,599,2.79,1.71,2.43
2007,Non-Hodgkin lymphoma,1136,5.29,3.24,4.60
2007,Oesophageal,921,4.29,2.63,3.73
2007,Ovarian,716,3.34,2.04,2.90
2007,Pancreatic,2227,10.38,6.35,9.02
2007,Prostate,2664,12.41,7.60,10.79
2007,Stomach,817,3.81,2.33,3.31
2007,Thyroid,141,0.66,0.40,0.57
2007,Uterine,448,2.09,1.28,1.81
2008,Bladder,722,3.32,2.01,2.86
2008,Bowel,4274,19.61,11.92,16.92
2008,Brain,1635,7.50,4.56,6.47
2008,Breast,2154,9.89,6.01,8.53
2008,Cervical,290,1.33,0.81,1.15
2008,Head and neck,909,4.17,2.53,3.60
2008,Kidney,856,3.93,2.39,3.39
2008,Leukaemia,1338,6.14,3.73,5.30
2008,Liver,1350,6.20,3.77,5.35
2008,Lung,6125,28.11,17.08,24.25
2008,Melanoma of the skin,1077,4.94,3.00,4.26
2008,Mesothelioma,639,2.93,1.78,2.53
2008,Non-Hodgkin lymphoma,1166,5.35,3.25,4.62
2008,Oesophageal,929,4.26,2.59,3.68
2008,Ovarian,697,3.20,1.94,2.76
2008,Pancreatic,2249,10.32,6.27,8.90
2008,Prostate,2694,12.36,7.51,10.67
2008,Stomach,842,3.86,2.35,3.33
2008,Thyroid,148,0.68,0.41,0.59
2008,Uterine,465,2.13,1.30,1.84
2009,Bladder,713,3.23,1.95,2.76
2009,Bowel,4117,18.61,11.23,15.94
2009,Brain,1657,7.49,4.52,6.42
2009,Breast,2224,10.05,6.06,8.61
2009,Cervical,303,1.37,0.83,1.17
2009,Head and neck,946,4.28,2.58,3.66
2009,Kidney,862,3.90,2.35,3.34
2009,Leukaemia,1311,5.93,3.57,5.08
2009,Liver,1392,6.29,3.80,5.39
2009,Lung,6234,28.18,17.00,24.14
2009,Melanoma of the skin,1127,5.09,3.07,4.36
2009,Mesothelioma,674,3.05,1.84,2.61
2009,Non-Hodgkin lymphoma,1161,5.25,3.17,4.49
2009,Oesophageal,917,4.14,2.50,3.55
2009,Ovarian,681,3.08,1.86,2.64
2009,Pancreatic,2328,10.52,6.35,9.01
2009,Prostate,2798,12.65,7.63,10.83
2009,Stomach,865,3.91,2.36,3.35
2009,Thyroid,152,0.69,0.41,0.59
2009,Uterine,472,2.13,1.29,1.83
2010,Bladder,696,3.10,1.86,2.64
2010,Bowel,4043,18.01,10.78,15.31
2010,Brain,1727,7.69,4.61,6.54
2010,Breast,2328,10.37,6.21,8.82
2010,Cervical,312,1.39,0.83,1.18
2010,Head and neck,959,4.27,2.56,3.63
2010,Kidney,853,3.80,2.28,3.23
2010,Leukaemia,1297,5.78,3.46,4.91
2010,Liver,1467,6.53,3.91,5.56
2010,Lung,6492,28.92,17.31,24.59
2010,Melanoma of the skin,1168,5.20,3.12,4.43
2010,Mesothelioma,694,3.09,1.85,2.63
2010,Non-Hodgkin lymphoma,1124,5.01,3.00,4.26
2010,Oesophageal,906,4.04,2.42,3.43
2010,Ovarian,684,3.05,1.83,2.59
2010,Pancreatic,2463,10.97,6.57,9.33
2010,Prostate,2907,12.95,7.75,11.01
2010,Stomach,864,3.85,2.30,3.27
2010,Thyroid,151,0.67,0.40,0.57
2010,Uterine,477,2.13,1.27,1.81
2011,Bladder,690,3.03,1.80,2.56
2011,Bowel,4111,18.05,10.73,15.24
2011,Brain,1826,8.02,4.77,6.77
2011,Breast,2403,10.55,6.27,8.91
2011,Cervical,312,1.37,0.81,1.16
2011,Head and neck,955,4.19,2.49,3.54
2011,Kidney,851,3.73,2.22,3.15
2011,Leukaemia,1322,5.80,3.45,4.90
2011,Liver,1569,6.89,4.10,5.82
2011,Lung,6722,29.51,17.54,24.91
2011,Melanoma of the skin,1177,5.17,3.07,4.36
2011,Mesothelioma,699,3.07,1.83,2.59
2011,Non-Hodgkin lymphoma,1086,4.77,2.83,4.02
2011,Oesophageal,919,4.03,2.40,3.41
2011,Ovarian,709,3.11,1.85,2.63
2011,Pancreatic,2612,11.46,6.82,9.68
2011,Prostate,2945,12.93,7.69,10.92
2011,Stomach,831,3.65,2.17,3.08
2011,Thyroid,150,0.66,0.39,0.56
2011,Uterine,490,2.15,1.28,1.82
2012,Bladder,707,3.06,1.81,2.56
2012,Bowel,4275,18.50,10.92,15.51
2012,Brain,1912,8.27,4.88,6.93
2012,Breast,2405,10.41,6.14,8.72
2012,Cervical,304,1.32,0.78,1.10
2012,Head and neck,955,4.13,2.44,3.46
2012,Kidney,871,3.77,2.23,3.16
2012,Leukaemia,1383,5.98,3.53,5.02
2012,Liver,1673,7.24,4.27,6.07
2012,Lung,6761,29.26,17.27,24.52
2012,Melanoma of the skin,1153,4.99,2.94,4.18
2012,Mesothelioma,703,3.04,1.80,2.55
2012,Non-Hodgkin lymphoma,1076,4.66,2.75,3.90
2012,Oesophageal,958,4.15,2.45,3.48
2012,Ovarian,740,3.20,1.89,2.69
2012,Pancreatic,2718,11.76,6.94,9.86
2012,Prostate,2886,12.49,7.37,10.47
2012,Stomach,785,3.40,2.01,2.85
2012,Thyroid,151,0.65,0.39,0.55
2012,Uterine,515,2.23,1.32,1.87
2013,Bladder,740,3.16,1.85,2.63
2013,Bowel,4406,18.80,11.02,15.65
2013,Brain,1950,8.32,4.88,6.92
2013,Breast,2344,10.00,5.86,8.32
2013,Cervical,297,1.27,0.74,1.05
2013,Head and neck,979,4.18,2.45,3.48
2013,Kidney,915,3.90,2.29,3.25
2013,Leukaemia,1448,6.18,3.62,5.14
2013,Liver,1752,7.48,4.38,6.22
2013,Lung,6582,28.08,16.46,23.37
2013,Melanoma of the skin,1118,4.77,2.80,3.97
2013,Mesothelioma,720,3.07,1.80,2.56
2013,Non-Hodgkin lymphoma,1105,4.71,2.76,3.92
2013,Oesophageal,1009,4.30,2.52,3.58
2013,Ovarian,757,3.23,1.89,2.69
2013,Pancreatic,2760,11.78,6.90,9.80
2013,Prostate,2776,11.84,6.94,9.86
2013,Stomach,753,3.21,1.88,2.67
2013,Thyroid,156,0.67,0.39,0.55
2013,Uterine,548,2.34,1.37,1.95
2014,Bladder,771,3.24,1.89,2.68
2014,Bowel,4395,18.49,10.76,15.28
2014,Brain,1943,8.18,4.76,6.76
2014,Breast,2278,9.58,5.58,7.92
2014,Cervical,297,1.25,0.73,1.03
2014,Head and neck,1028,4.33,2.52,3.58
2014,Kidney,963,4.05,2.36,3.35
2014,Leukaemia,1480,6.23,3.62,5.15
2014,Liver,1799,7.57,4.40,6.25
2014,Lung,6323,26.60,15.48,21.99
2014,Melanoma of the skin,1108,4.66,2.71,3.85
2014,Mesothelioma,755,3.18,1.85,2.63
2014,Non-Hodgkin lymphoma,1152,4.85,2.82,4.01
2014,Oesophageal,1044,4.39,2.56,3.63
2014,Ovarian,748,3.15,1.83,2.60
2014,Pancreatic,2764,11.63,6.77,9.61
2014,Prostate,2702,11.37,6.62,9.40
2014,Stomach,752,3.16,1.84,2.61
2014,Thyroid,164,0.69,0.40,0.57
2014,Uterine,579,2.44,1.42,2.01
2015,Bladder,781,3.24,1.87,2.66
2015,Bowel,4235,17.57,10.16,14.42
2015,Brain,1929,8.01,4.63,6.57
2015,Breast,2271,9.42,5.45,7.74
2015,Cervical,308,1.28,0.74,1.05
2015,Head and neck,1086,4.51,2.60,3.70
2015,Kidney,995,4.13,2.39,3.39
2015,Leukaemia,1467,6.09,3.52,5.00
2015,Liver,1832,7.60,4.39,6.24
2015,Lung,6186,25.67,14.84,21.07
2015,Melanoma of the skin,1136,4.71,2.72,3.87
2015,Mesothelioma,801,3.32,1.92,2.73
2015,Non-Hodgkin lymphoma,1181,4.90,2.83,4.02
2015,Oesophageal,1050,4.36,2.52,3.58
2015,Ovarian,722,3.00,1.73,2.46
2015,Pancreatic,2789,11.57,6.69,9.50
2015,Prostate,2725,11.31,6.54,9.28
2015,Stomach,775,3.22,1.86,2.64
2015,Thyroid,172,0.71,0.41,0.59
2015,Uterine,599,2.48,1.44,2.04
2016,Bladder,768,3.14,1.80,2.56
2016,Bowel,4030,16.50,9.47,13.45
2016,Brain,1953,7.99,4.59,6.52
2016,Breast,2344,9.59,5.51,7.82
2016,Cervical,322,1.32,0.76,1.08
2016,Head and neck,1128,4.62,2.65,3.76
2016,Kidney,999,4.09,2.35,3.33
2016,Leukaemia,1431,5.86,3.36,4.77
2016,Liver,1883,7.71,4.43,6.28
2016,Lung,6285,25.73,14.77,20.97
2016,Melanoma of the skin,1189,4.87,2.79,3.97
2016,Mesothelioma,841,3.44,1.98,2.81
2016,Non-Hodgkin lymphoma,1168,4.78,2.74,3.90
2016,Oesophageal,1033,4.23,2.43,3.45
2016,Ovarian,700,2.87,1.65,2.34
2016,Pancreatic,2881,11.79,6.77,9.61
2016,Prostate,2832,11.59,6.65,9.45
2016,Stomach,796,3.26,1.87,2.66
2016,Thyroid,176,0.72,0.41,0.59
2016,Uterine,607,2.48,1.43,2.03
2017,Bladder,745,3.01,1.72,2.44
2017,Bowel,3923,15.84,9.03,12.83
2017,Brain,2032,8.21,4.68,6.65
2017,Breast,2455,9.91,5.65,8.03
2017,Cervical,332,1.34,0.76,1.08
2017,Head and neck,1141,4.61,2.63,3.73
2017,Kidney,987,3.99,2.27,3.23
2017,Leukaemia,1411,5.70,3.25,4.61
2017,Liver,1973,7.97,4.54,6.45
2017,Lung,6552,26.46,15.09,21.42
2017,Melanoma of the skin,1232,4.98,2.84,4.03
2017,Mesothelioma,864,3.49,1.99,2.83
2017,Non-Hodgkin lymphoma,1119,4.52,2.58,3.66
2017,Oesophageal,1019,4.12,2.35,3.33
2017,Ovarian,702,2.83,1.62,2.29
2017,Pancreatic,3037,12.27,6.99,9.93
2017,Prostate,2944,11.89,6.78,9.62
2017,Stomach,788,3.18,1.81,2.58
2017,Thyroid,175,0.71,0.40,0.57
2017,Uterine,613,2.48,1.41,2.01
2018,Bladder,736,2.93,1.66,2.36
2018,Bowel,3982,15.87,8.99,12.76
2018,Brain,2144,8.55,4.84,6.87
2018,Breast,2531,10.09,5.71,8.11
2018,Cervical,330,1.31,0.74,1.06
2018,Head and neck,1135,4.52,2.56,3.64
2018,Kidney,983,3.92,2.22,3.15
2018,Leukaemia,1437,5.73,3.24,4.60
2018,Liver,2095,8.35,4.73,6.71
2018,Lung,6784,27.04,15.31,21.74
2018,Melanoma of the skin,1237,4.93,2.79,3.96
2018,Mesothelioma,870,3.47,1.96,2.79
2018,Non-Hodgkin lymphoma,1069,4.26,2.41,3.43
2018,Oesophageal,1032,4.11,2.33,3.31
2018,Ovarian,728,2.90,1.64,2.33
2018,Pancreatic,3207,12.78,7.24,10.28
2018,Prostate,2971,11.84,6.71,9.52
2018,Stomach,744,2.96,1.68,2.38
2018,Thyroid,173,0.69,0.39,0.56
2018,Uterine,629,2.51,1.42,2.01
2019,Bladder,753,2.96,1.67,2.37
2019,Bowel,4148,16.32,9.18,13.03
2019,Brain,2239,8.81,4.95,7.03
2019,Breast,2523,9.92,5.58,7.93
2019,Cervical,319,1.26,0.71,1.00
2019,Head and neck,1134,4.46,2.51,3.56
2019,Kidney,1006,3.96,2.23,3.16
2019,Leukaemia,1503,5.91,3.33,4.72
2019,Liver,2217,8.72,4.91,6.97
2019,Lung,6791,26.72,15.03,21.34
2019,Melanoma of the skin,1203,4.73,2.66,3.78
2019,Mesothelioma,875,3.44,1.94,2.75
2019,Non-Hodgkin lymphoma,1053,4.14,2.33,3.31
2019,Oesophageal,1076,4.23,2.38,3.38
2019,Ovarian,760,2.99,1.68,2.39
2019,Pancreatic,3328,13.09,7.36,10.46
2019,Prostate,2887,11.36,6.39,9.07
2019,Stomach,684,2.69,1.51,2.15
2019,Thyroid,174,0.68,0.39,0.55
2019,Uterine,658,2.59,1.46,2.07
2020,Bladder,789,3.06,1.71,2.43
2020,Bowel,4274,16.60,9.27,13.17
2020,Brain,2279,8.85,4.94,7.02
2020,Breast,2442,9.48,5.30,7.52
2020,Cervical,309,1.20,0.67,0.95
2020,Head and neck,1161,4.51,2.52,3.58
2020,Kidney,1055,4.10,2.29,3.25
2020,Leukaemia,1572,6.11,3.41,4.84
2020,Liver,2310,8.97,5.01,7.12
2020,Lung,6548,25.43,14.21,20.17
2020,Melanoma of the skin,1159,4.50,2.52,3.57
2020,Mesothelioma,895,3.47,1.94,2.76
2020,Non-Hodgkin lymphoma,1081,4.20,2.35,3.33
2020,Oesophageal,1131,4.39,2.45,3.48
2020,Ovarian,776,3.01,1.68,2.39
2020,Pancreatic,3374,13.10,7.32,10.39
2020,Prostate,2746,10.66,5.96,8.46
2020,Stomach,642,2.49,1.39,1.98
2020,Thyroid,180,0.70,0.39,0.55
2020,Uterine,697,2.71,1.51,2.15
2021,Bladder,822,3.15,1.75,2.48
2021,Bowel,4234,16.23,9.01,12.79
2021,Brain,2268,8.70,4.83,6.85
2021,Breast,2357,9.04,5.02,7.12
2021,Cervical,309,1.19,0.66,0.93
2021,Head and neck,1217,4.67,2.59,3.68
2021,Kidney,1109,4.25,2.36,3.35
2021,Leukaemia,1604,6.15,3.41,4.85
2021,Liver,2365,9.07,5.03,7.15
2021,Lung,6219,23.84,13.23,18.79
2021,Melanoma of the skin,1143,4.38,2.43,3.45
2021,Mesothelioma,935,3.59,1.99,2.83
2021,Non-Hodgkin lymphoma,1129,4.33,2.40,3.41
2021,Oesophageal,1169,4.48,2.49,3.53
2021,Ovarian,762,2.92,1.62,2.30
2021,Pancreatic,3376,12.95,7.18,10.20
2021,Prostate,2648,10.15,5.63,8.00
2021,Stomach,635,2.44,1.35,1.92
2021,Thyroid,189,0.73,0.40,0.57
2021,Uterine,732,2.81,1.56,2.21
2022,Bladder,830,3.14,1.73,2.46
2022,Bowel,4023,15.23,8.40,11.93
2022,Brain,2249,8.52,4.70,6.67
2022,Breast,2342,8.87,4.89,6.94
2022,Cervical,320,1.21,0.67,0.95
2022,Head and neck,1282,4.85,2.68,3.80
2022,Kidney,1143,4.33,2.39,3.39
2022,Leukaemia,1584,6.00,3.31,4.70
2022,Liver,2406,9.11,5.02,7.13
2022,Lung,6034,22.85,12.60,17.89
2022,Melanoma of the skin,1172,4.44,2.45,3.47
2022,Mesothelioma,988,3.74,2.06,2.93
2022,Non-Hodgkin lymphoma,1156,4.38,2.41,3.43
2022,Oesophageal,1172,4.44,2.45,3.47
2022,Ovarian,728,2.76,1.52,2.16
2022,Pancreatic,3405,12.89,7.11,10.09
2022,Prostate,2663,10.08,5.56,7.89
2022,Stomach,657,2.49,1.37,1.95
2022,Thyroid,198,0.75,0.41,0.59
2022,Uterine,755,2.86,1.58,2.24
2023,Bladder,812,3.04,1.66,2.36
2023,Bowel,3766,14.08,7.71,10.95
2023,Brain,2275,8.51,4.66,6.62
2023,Breast,2418,9.04,4.95,7.03
2023,Cervical,336,1.26,0.69,0.98
2023,Head and neck,1328,4.97,2.72,3.86
2023,Kidney,1146,4.29,2.35,3.33
2023,Leukaemia,1538,5.75,3.15,4.47
2023,Liver,2468,9.23,5.05,7.18
2023,Lung,6122,22.89,12.54,17.80
2023,Melanoma of the skin,1228,4.59,2.52,3.57
2023,Non-Hodgkin lymphoma,1134,4.24,2.32,3.30
2023,Oesophageal,1150,4.30,2.36,3.35
2023,Ovarian,701,2.62,1.43,2.04
2023,Pancreatic,3511,13.13,7.19,10.21
2023,Prostate,2774,10.37,5.68,8.07
2023,Stomach,675,2.52,1.38,1.96
2023,Thyroid,202,0.76,0.41,0.59
2023,Uterine,765,2.86,1.57,2.22
"""
